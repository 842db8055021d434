"""Per-client request limiting for the public routes, using throttled-py."""

import logging
from collections.abc import Awaitable, Callable, Collection
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from throttled import RateLimiterType, Throttled, rate_limiter, store

from mention_relay.adapters.web.client_info import get_client_info_from_scope

logger = logging.getLogger(__name__)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Limits requests per client IP, except on exempt paths.

    The webhook sender is authenticated by signature and must always be
    acknowledged, so its path is normally exempt.
    """

    def __init__(
        self,
        app: Callable,
        requests_per_minute: int = 300,
        exempt_paths: Collection[str] = (),
    ) -> None:
        """Initialize rate limiting middleware.

        Args:
            app: The ASGI application to wrap.
            requests_per_minute: Maximum number of requests allowed per IP per minute.
            exempt_paths: Request paths that are never limited.
        """
        super().__init__(app)
        self.requests_per_minute = requests_per_minute
        self.exempt_paths = frozenset(exempt_paths)
        self.quota = rate_limiter.per_min(requests_per_minute, burst=requests_per_minute)
        self.rate_limiter_store = store.MemoryStore()
        logger.info(
            f"Rate limiting enabled: {requests_per_minute} requests per minute per IP, "
            f"exempt={sorted(self.exempt_paths)}"
        )

    def _retry_after(self, result: Any) -> int:
        state = getattr(result, "state", None)
        retry_after = getattr(state, "retry_after", None)
        return int(retry_after) if retry_after is not None else 60

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Reject the request with 429 once its client exhausts the quota."""
        if request.url.path in self.exempt_paths:
            return await call_next(request)

        client_ip = get_client_info_from_scope(request.scope).ip
        throttle = Throttled(
            key=f"relay:{client_ip}",
            using=RateLimiterType.TOKEN_BUCKET.value,
            quota=self.quota,
            store=self.rate_limiter_store,
        )

        result = throttle.limit()
        if result.limited:
            retry_after = self._retry_after(result)
            logger.warning(f"Rate limit exceeded for {client_ip} on {request.url.path}")
            return Response(
                content="Rate limit exceeded. Please try again later.",
                status_code=429,
                headers={"Retry-After": str(retry_after)},
            )

        return await call_next(request)
