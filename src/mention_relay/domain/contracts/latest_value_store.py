"""Protocol for the latest value store."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from mention_relay.domain.models.media_record import MediaRecord


class LatestValueStoreProtocol(Protocol):
    """Protocol for holding the single current media record."""

    def get(self) -> "MediaRecord":
        """Get the current record.

        Returns:
            The current record, or the empty record if nothing was stored yet.
        """
        ...

    def replace(self, record: "MediaRecord") -> None:
        """Replace the current record wholesale.

        Args:
            record: The new record.
        """
        ...
