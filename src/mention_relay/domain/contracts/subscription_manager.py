"""Protocol for opening and closing event stream subscriptions."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from mention_relay.domain.contracts.subscriber import SubscriberProtocol
    from mention_relay.domain.models.media_record import MediaRecord


class SubscriptionManagerProtocol(Protocol):
    """Protocol for snapshot-then-live subscriptions."""

    def current(self) -> "MediaRecord":
        """Current record."""
        ...

    def open(self) -> "SubscriberProtocol":
        """Register a subscriber whose first frame is the current snapshot."""
        ...

    def close(self, subscriber: "SubscriberProtocol") -> None:
        """Unregister a subscriber. Idempotent."""
        ...
