"""Server-sent events framing and per-connection stream writer."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mention_relay.domain.contracts.subscriber import SubscriberProtocol
    from mention_relay.domain.models.latest_event import LatestEvent

logger = logging.getLogger(__name__)

KEEPALIVE_FRAME = ": keepalive\n\n"

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    # Keeps reverse proxies such as nginx from buffering the stream
    "X-Accel-Buffering": "no",
}


def encode_event(event: LatestEvent) -> str:
    """Encode an event as a single ``data:`` frame."""
    return f"data: {event.to_json()}\n\n"


async def event_stream(
    subscriber: SubscriberProtocol,
    on_close: Callable[[SubscriberProtocol], None],
    keepalive_seconds: float = 0,
) -> AsyncIterator[str]:
    """Yield frames queued for a subscriber until it is closed or disconnects.

    ``on_close`` runs exactly once when the stream ends for any reason,
    including cancellation by the server when the client goes away.

    Args:
        subscriber: The registered subscriber to drain.
        on_close: Callback that unregisters the subscriber.
        keepalive_seconds: Idle interval before a comment frame is sent, 0 disables.
            With keepalives disabled an idle stream is only released when the
            server reports the disconnect and cancels this generator.
    """
    timeout = keepalive_seconds if keepalive_seconds > 0 else None
    try:
        while True:
            try:
                frame = await subscriber.next_frame(timeout=timeout)
            except TimeoutError:
                yield KEEPALIVE_FRAME
                continue
            if frame is None:
                break
            yield frame
    finally:
        logger.debug(f"Event stream for subscriber {subscriber.subscriber_id} ended")
        on_close(subscriber)
