"""Security adapters."""

from mention_relay.adapters.security.signature_verifier import (
    SIGNATURE_HEADER,
    HmacSignatureVerifier,
    compute_signature,
    verify_signature,
)

__all__ = [
    "SIGNATURE_HEADER",
    "HmacSignatureVerifier",
    "compute_signature",
    "verify_signature",
]
