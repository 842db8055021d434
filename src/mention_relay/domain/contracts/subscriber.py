"""Protocol for a single event stream subscriber."""

from typing import Protocol


class SubscriberProtocol(Protocol):
    """One open push channel to a connected display client."""

    @property
    def subscriber_id(self) -> str:
        """Stable identifier used in logs."""
        ...

    @property
    def closed(self) -> bool:
        """Whether the subscriber stopped accepting frames."""
        ...

    def offer(self, frame: str) -> bool:
        """Queue an encoded frame without blocking.

        Returns:
            True if queued, False if the subscriber is closed or full.
        """
        ...

    def close(self) -> None:
        """Stop accepting frames and wake the stream writer."""
        ...

    async def next_frame(self, timeout: float | None = None) -> str | None:
        """Wait for the next queued frame.

        Returns:
            The frame, or None once the subscriber is closed.

        Raises:
            TimeoutError: If no frame arrived within ``timeout`` seconds.
        """
        ...
