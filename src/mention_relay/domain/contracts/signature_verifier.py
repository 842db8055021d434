"""Protocol for webhook signature verification."""

from typing import Protocol


class SignatureVerifierProtocol(Protocol):
    """Protocol for authenticating inbound webhook notifications."""

    @property
    def enabled(self) -> bool:
        """Whether signatures are checked at all."""
        ...

    def verify(self, raw_body: bytes, signature_header: str | None) -> bool:
        """Check a signature header against the exact bytes received.

        Args:
            raw_body: The unparsed request body.
            signature_header: The presented ``sha256=<hex>`` header value.

        Returns:
            True if the signature is valid, False otherwise. Never raises.
        """
        ...
