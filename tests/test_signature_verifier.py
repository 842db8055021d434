"""Tests for webhook signature verification."""

import hashlib
import hmac
from unittest.mock import patch

import pytest

from mention_relay.adapters.security import (
    HmacSignatureVerifier,
    compute_signature,
    verify_signature,
)

SECRET = "s3cret"
BODY = b'{"object":"instagram","entry":[]}'


def _header(body: bytes, secret: str = SECRET) -> str:
    return "sha256=" + hmac.new(secret.encode(), body, hashlib.sha256).hexdigest()


class TestVerifySignature:
    """Tests for the verify_signature function."""

    def test_when_signature_matches_then_returns_true(self) -> None:
        """Given the correct HMAC header, when verifying, then returns True."""
        assert verify_signature(BODY, _header(BODY), SECRET) is True

    def test_when_empty_body_signed_then_returns_true(self) -> None:
        """Given an empty body with its signature, when verifying, then returns True."""
        assert verify_signature(b"", _header(b""), SECRET) is True

    def test_when_any_body_bit_flipped_then_returns_false(self) -> None:
        """Given a body with a single flipped bit, when verifying, then returns False."""
        header = _header(BODY)
        for index in range(len(BODY)):
            for bit in range(8):
                tampered = bytearray(BODY)
                tampered[index] ^= 1 << bit
                assert verify_signature(bytes(tampered), header, SECRET) is False

    def test_when_any_header_bit_flipped_then_returns_false(self) -> None:
        """Given a header with a single flipped bit, when verifying, then returns False without raising."""
        header = _header(BODY)
        for index in range(len(header)):
            for bit in range(8):
                tampered = header[:index] + chr(ord(header[index]) ^ (1 << bit)) + header[index + 1 :]
                assert verify_signature(BODY, tampered, SECRET) is False

    @pytest.mark.parametrize(
        "header",
        [
            None,
            "",
            "sha256=",
            "sha1=abcdef",
            "SHA256=" + "0" * 64,
            "sha256=" + "0" * 63,
            "sha256=not-hex-at-all",
            "sha256=ünïcödé",
        ],
    )
    def test_when_header_malformed_then_returns_false(self, header: str | None) -> None:
        """Given a malformed header, when verifying, then returns False."""
        assert verify_signature(BODY, header, SECRET) is False

    def test_when_uppercase_hex_presented_then_returns_false(self) -> None:
        """Given an uppercase digest, when verifying, then it does not match."""
        header = "sha256=" + compute_signature(BODY, SECRET).upper()

        assert verify_signature(BODY, header, SECRET) is False

    def test_when_wrong_secret_then_returns_false(self) -> None:
        """Given a header signed with another secret, when verifying, then returns False."""
        assert verify_signature(BODY, _header(BODY, "other"), SECRET) is False

    def test_when_secret_empty_then_returns_false(self) -> None:
        """Given an empty secret, when verifying a header signed with it, then returns False."""
        assert verify_signature(BODY, _header(BODY, ""), "") is False

    def test_when_verifying_then_uses_constant_time_comparison(self) -> None:
        """Given any header, when verifying, then digests are compared with compare_digest."""
        with patch(
            "mention_relay.adapters.security.signature_verifier.hmac.compare_digest",
            wraps=hmac.compare_digest,
        ) as mock_compare:
            verify_signature(BODY, _header(BODY), SECRET)
            verify_signature(BODY, "sha256=" + "0" * 64, SECRET)

        assert mock_compare.call_count == 2


class TestHmacSignatureVerifier:
    """Tests for the verifier adapter."""

    def test_when_enabled_then_checks_signature(self) -> None:
        """Given an enabled verifier, when verifying, then bad signatures are rejected."""
        verifier = HmacSignatureVerifier(SECRET)

        assert verifier.enabled is True
        assert verifier.verify(BODY, _header(BODY)) is True
        assert verifier.verify(BODY, "sha256=" + "0" * 64) is False

    def test_when_disabled_then_accepts_anything(self) -> None:
        """Given a disabled verifier, when verifying, then everything is accepted."""
        verifier = HmacSignatureVerifier("dev_secret", enabled=False)

        assert verifier.enabled is False
        assert verifier.verify(BODY, None) is True
