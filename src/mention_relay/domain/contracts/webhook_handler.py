"""Protocol for handling inbound webhook requests."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from mention_relay.domain.models.media_record import MediaRecord


class WebhookHandlerProtocol(Protocol):
    """Protocol for the webhook handshake and notification use cases."""

    @property
    def fetch_enabled(self) -> bool:
        """Whether notifications trigger an upstream fetch."""
        ...

    def verify_handshake(
        self, mode: str | None, verify_token: str | None, challenge: str | None
    ) -> str | None:
        """Return the challenge to echo, or None to reject the handshake."""
        ...

    def authenticate(self, raw_body: bytes, signature_header: str | None) -> bool:
        """Check that a notification comes from the trusted sender."""
        ...

    async def process_notification(self) -> "MediaRecord | None":
        """Fetch and broadcast the latest record. Never raises."""
        ...
