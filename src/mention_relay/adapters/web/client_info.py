"""Utilities for extracting client information from ASGI scopes.

These helpers are small and tolerant of missing data so they can be used for
connection logging without ever failing a request.
"""

from __future__ import annotations

from typing import Any

from mention_relay.domain.models.client_info import ClientInfo

UNKNOWN = "unknown"


def _decode_header_value(value: Any) -> str:
    """Decode a header value into a readable string."""
    if isinstance(value, bytes):
        return value.decode("latin1", errors="replace")
    return str(value)


def get_client_info_from_scope(scope: Any) -> ClientInfo:
    """Extract client IP and user agent from an ASGI scope-like mapping.

    Returns:
        ClientInfo whose missing values fall back to ``"unknown"``.
    """
    if not isinstance(scope, dict):
        return ClientInfo(ip=UNKNOWN, user_agent=UNKNOWN)

    user_agent = UNKNOWN
    forwarded_for: str | None = None

    for name, value in scope.get("headers") or []:
        decoded_name = _decode_header_value(name).lower()
        if decoded_name == "user-agent":
            user_agent = _decode_header_value(value)
            # Avoid excessively long user agent strings in logs
            if len(user_agent) > 200:
                user_agent = f"{user_agent[:197]}..."
        elif decoded_name == "x-forwarded-for":
            forwarded_for = _decode_header_value(value)

    ip = UNKNOWN
    if forwarded_for and forwarded_for.split(",")[0].strip():
        # X-Forwarded-For may contain a list: client, proxy1, proxy2, ...
        ip = forwarded_for.split(",")[0].strip()
    else:
        client = scope.get("client")
        if isinstance(client, (list, tuple)) and client:
            candidate = client[0]
            if isinstance(candidate, (str, bytes)):
                ip = _decode_header_value(candidate)

    return ClientInfo(ip=ip, user_agent=user_agent)
