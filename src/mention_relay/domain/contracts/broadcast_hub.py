"""Protocol for fan-out of events to subscribers."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from mention_relay.domain.contracts.subscriber import SubscriberProtocol
    from mention_relay.domain.models.latest_event import LatestEvent


class BroadcastHubProtocol(Protocol):
    """Protocol for tracking subscribers and pushing events to all of them."""

    @property
    def subscriber_count(self) -> int:
        """Number of currently registered subscribers."""
        ...

    def subscribe(self, initial_event: "LatestEvent | None" = None) -> "SubscriberProtocol":
        """Register a new subscriber.

        Args:
            initial_event: Snapshot queued ahead of any later broadcast.

        Returns:
            The registered subscriber handle.
        """
        ...

    def unsubscribe(self, subscriber: "SubscriberProtocol") -> None:
        """Forget a subscriber. Unknown or already removed handles are ignored."""
        ...

    def push_to_all(self, event: "LatestEvent") -> int:
        """Deliver an event to every registered subscriber.

        Returns:
            Number of subscribers the event was queued for.
        """
        ...

    def close_all(self) -> None:
        """Close and forget every subscriber."""
        ...
