"""Broadcasters for web adapter."""

from mention_relay.adapters.web.broadcasters.broadcast_hub import BroadcastHub
from mention_relay.adapters.web.broadcasters.subscriber import QueueSubscriber

__all__ = ["BroadcastHub", "QueueSubscriber"]
