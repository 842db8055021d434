"""Broadcast hub fanning out events to event stream subscribers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mention_relay.adapters.web.broadcasters.subscriber import QueueSubscriber
from mention_relay.adapters.web.streams.sse import encode_event
from mention_relay.domain.contracts.broadcast_hub import BroadcastHubProtocol

if TYPE_CHECKING:
    from mention_relay.domain.contracts.subscriber import SubscriberProtocol
    from mention_relay.domain.models.latest_event import LatestEvent

logger = logging.getLogger(__name__)


class BroadcastHub(BroadcastHubProtocol):
    """Tracks connected subscribers and pushes events to all of them.

    Every method is synchronous and runs on the event loop, so membership
    changes and a broadcast never interleave.
    """

    def __init__(self, max_queued_frames: int = 16) -> None:
        """Initialize the hub.

        Args:
            max_queued_frames: Per-subscriber backlog before it is dropped.
        """
        self._max_queued_frames = max_queued_frames
        self._subscribers: set[SubscriberProtocol] = set()

    @property
    def subscriber_count(self) -> int:
        """Number of currently registered subscribers."""
        return len(self._subscribers)

    def subscribe(self, initial_event: LatestEvent | None = None) -> QueueSubscriber:
        """Register a new subscriber, queueing the snapshot as its first frame."""
        subscriber = QueueSubscriber(max_queued_frames=self._max_queued_frames)
        if initial_event is not None:
            subscriber.offer(encode_event(initial_event))
        self._subscribers.add(subscriber)
        logger.info(
            f"Subscriber {subscriber.subscriber_id} connected, total connected: "
            f"{len(self._subscribers)}"
        )
        return subscriber

    def unsubscribe(self, subscriber: SubscriberProtocol) -> None:
        """Forget a subscriber. Idempotent."""
        if subscriber not in self._subscribers:
            return
        self._subscribers.discard(subscriber)
        subscriber.close()
        logger.info(
            f"Subscriber {subscriber.subscriber_id} disconnected, total connected: "
            f"{len(self._subscribers)}"
        )

    def push_to_all(self, event: LatestEvent) -> int:
        """Serialize an event once and queue it for every subscriber.

        Subscribers that are closed or whose backlog is full are dropped.
        """
        frame = encode_event(event)
        delivered = 0
        stale: list[SubscriberProtocol] = []
        for subscriber in list(self._subscribers):
            if subscriber.offer(frame):
                delivered += 1
            else:
                stale.append(subscriber)

        for subscriber in stale:
            logger.warning(
                f"Dropping subscriber {subscriber.subscriber_id}: not accepting frames"
            )
            self.unsubscribe(subscriber)

        return delivered

    def close_all(self) -> None:
        """Close and forget every subscriber."""
        subscribers = list(self._subscribers)
        self._subscribers.clear()
        for subscriber in subscribers:
            subscriber.close()
        if subscribers:
            logger.info(f"Closed {len(subscribers)} subscriber(s)")
