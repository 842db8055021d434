"""Utility for logging upstream API requests when RELAY_LOG_REQUESTS is enabled."""

import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"


def should_log_requests() -> bool:
    """Check if request logging is enabled via RELAY_LOG_REQUESTS environment variable."""
    return os.getenv("RELAY_LOG_REQUESTS", "").lower() == "true"


def _redact_sensitive_params(params: dict[str, Any]) -> dict[str, Any]:
    """Redact credentials passed as query parameters."""
    sensitive_keys = {"access_token", "appsecret_proof"}
    return {k: REDACTED if k.lower() in sensitive_keys else v for k, v in params.items()}


def _build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    """Build full URL with query parameters."""
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in sorted(params.items()))
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
) -> None:
    """Log API request details if RELAY_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL.
        params: Query parameters (optional, credentials are redacted).
    """
    if not should_log_requests():
        return

    safe_params = _redact_sensitive_params(params) if params else None
    logger.info(f"API Request: {method} {_build_url_with_params(url, safe_params)}")
