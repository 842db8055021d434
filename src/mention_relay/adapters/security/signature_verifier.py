"""HMAC-SHA256 verification of webhook signatures."""

from __future__ import annotations

import hashlib
import hmac
import logging

from mention_relay.domain.contracts.signature_verifier import SignatureVerifierProtocol

logger = logging.getLogger(__name__)

SIGNATURE_PREFIX = "sha256="
SIGNATURE_HEADER = "X-Hub-Signature-256"


def compute_signature(raw_body: bytes, shared_secret: str) -> str:
    """Compute the hex HMAC-SHA256 digest of a body."""
    return hmac.new(shared_secret.encode("utf-8"), raw_body, hashlib.sha256).hexdigest()


def verify_signature(raw_body: bytes, signature_header: str | None, shared_secret: str) -> bool:
    """Check a ``sha256=<hex>`` header against the exact bytes received.

    The digests are compared with ``hmac.compare_digest`` so the time taken
    does not depend on where the first mismatching byte is. Any malformed
    input yields False.
    """
    if not shared_secret or not isinstance(signature_header, str):
        return False
    if not signature_header.startswith(SIGNATURE_PREFIX):
        return False

    presented = signature_header[len(SIGNATURE_PREFIX) :]
    try:
        expected = compute_signature(raw_body, shared_secret)
        return hmac.compare_digest(presented.encode("ascii"), expected.encode("ascii"))
    except (TypeError, ValueError) as e:
        # UnicodeEncodeError is a ValueError: non-ASCII header content
        logger.debug(f"Malformed signature header: {e}")
        return False


class HmacSignatureVerifier(SignatureVerifierProtocol):
    """Verifies X-Hub-Signature-256 headers with a shared secret."""

    def __init__(self, shared_secret: str, enabled: bool = True) -> None:
        """Initialize the verifier.

        Args:
            shared_secret: HMAC key shared with the webhook sender.
            enabled: False accepts every notification. Only for local runs.
        """
        self._shared_secret = shared_secret
        self._enabled = enabled
        if not enabled:
            logger.warning("Webhook signature verification is DISABLED (development secret)")
        elif not shared_secret:
            logger.warning("No app secret configured, every webhook notification will be rejected")

    @property
    def enabled(self) -> bool:
        """Whether signatures are checked at all."""
        return self._enabled

    def verify(self, raw_body: bytes, signature_header: str | None) -> bool:
        """Check a signature header against the exact bytes received."""
        if not self._enabled:
            return True
        return verify_signature(raw_body, signature_header, self._shared_secret)
