"""Event stream helpers for web adapter."""

from mention_relay.adapters.web.streams.sse import (
    KEEPALIVE_FRAME,
    SSE_HEADERS,
    encode_event,
    event_stream,
)

__all__ = ["KEEPALIVE_FRAME", "SSE_HEADERS", "encode_event", "event_stream"]
