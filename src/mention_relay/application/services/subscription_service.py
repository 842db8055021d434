"""Subscription use case: snapshot first, then live updates."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mention_relay.domain.models import LatestEvent, MediaRecord

if TYPE_CHECKING:
    from mention_relay.domain.contracts import (
        BroadcastHubProtocol,
        LatestValueStoreProtocol,
        SubscriberProtocol,
    )

logger = logging.getLogger(__name__)


class SubscriptionService:
    """Opens and closes event stream subscriptions."""

    def __init__(self, store: LatestValueStoreProtocol, hub: BroadcastHubProtocol) -> None:
        """Initialize with the store and the hub."""
        self._store = store
        self._hub = hub

    def current(self) -> MediaRecord:
        """Current record, used to render the display page."""
        return self._store.get()

    def open(self) -> SubscriberProtocol:
        """Register a subscriber whose first frame is the current snapshot.

        The snapshot is read and the subscriber registered in one step without
        awaiting, so no broadcast can be interleaved between the two.
        """
        snapshot = LatestEvent(latest=self._store.get())
        subscriber = self._hub.subscribe(initial_event=snapshot)
        logger.debug(f"Opened subscription {subscriber.subscriber_id}")
        return subscriber

    def close(self, subscriber: SubscriberProtocol) -> None:
        """Unregister a subscriber. Safe to call more than once."""
        self._hub.unsubscribe(subscriber)
