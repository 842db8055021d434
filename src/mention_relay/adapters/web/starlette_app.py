"""Starlette web adapter serving the webhook, the display page and the event stream."""

from __future__ import annotations

import contextlib
import logging
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError
from starlette.applications import Starlette
from starlette.background import BackgroundTask
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import HTMLResponse, PlainTextResponse, Response, StreamingResponse
from starlette.routing import Route

from mention_relay.adapters.config import AppConfig
from mention_relay.adapters.security import SIGNATURE_HEADER
from mention_relay.adapters.web.client_info import get_client_info_from_scope
from mention_relay.adapters.web.rate_limit_middleware import RateLimitMiddleware
from mention_relay.adapters.web.streams import SSE_HEADERS, event_stream
from mention_relay.adapters.web.views import render_screen
from mention_relay.domain.models import WebhookNotification
from mention_relay.domain.ports import DisplayAdapter

if TYPE_CHECKING:
    from mention_relay.domain.contracts import (
        BroadcastHubProtocol,
        SubscriptionManagerProtocol,
        WebhookHandlerProtocol,
    )

logger = logging.getLogger(__name__)

WEBHOOK_PATH = "/ig/webhook"
EVENTS_PATH = "/events"


class StarletteWebAdapter(DisplayAdapter):
    """Starlette-based adapter exposing the relay over HTTP."""

    def __init__(
        self,
        config: AppConfig,
        webhook_service: WebhookHandlerProtocol,
        subscription_service: SubscriptionManagerProtocol,
        hub: BroadcastHubProtocol,
    ) -> None:
        """Initialize the web adapter.

        Args:
            config: Application configuration.
            webhook_service: Handles handshakes and notifications.
            subscription_service: Opens and closes event stream subscriptions.
            hub: Broadcast hub, closed on shutdown so open streams end.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")

        self.config = config
        self.webhook_service = webhook_service
        self.subscription_service = subscription_service
        self.hub = hub
        self._server: Any | None = None

    def build_app(self) -> Starlette:
        """Create the ASGI application with all routes and middleware."""
        middleware: list[Middleware] = []
        if self.config.rate_limit_per_minute > 0:
            middleware.append(
                Middleware(
                    RateLimitMiddleware,
                    requests_per_minute=self.config.rate_limit_per_minute,
                    exempt_paths=(WEBHOOK_PATH,),
                )
            )

        routes = [
            Route("/", self.healthz, methods=["GET"]),
            Route(WEBHOOK_PATH, self.verify_webhook, methods=["GET"]),
            Route(WEBHOOK_PATH, self.receive_webhook, methods=["POST"]),
            Route("/screen", self.screen, methods=["GET"]),
            Route(EVENTS_PATH, self.events, methods=["GET"]),
        ]
        return Starlette(routes=routes, middleware=middleware, lifespan=self._lifespan)

    @contextlib.asynccontextmanager
    async def _lifespan(self, _app: Starlette) -> AsyncIterator[None]:
        """Close every event stream when the application shuts down."""
        logger.info(
            f"Relay ready: signature verification "
            f"{'enabled' if self.config.signature_verification_enabled else 'DISABLED'}, "
            f"upstream fetch {'enabled' if self.webhook_service.fetch_enabled else 'disabled'}"
        )
        try:
            yield
        finally:
            self.hub.close_all()

    async def healthz(self, _request: Request) -> Response:
        """Liveness check."""
        return PlainTextResponse("OK")

    async def verify_webhook(self, request: Request) -> Response:
        """Answer the webhook subscription handshake."""
        params = request.query_params
        challenge = self.webhook_service.verify_handshake(
            params.get("hub.mode"),
            params.get("hub.verify_token"),
            params.get("hub.challenge"),
        )
        if challenge is None:
            return PlainTextResponse("Forbidden", status_code=403)
        return PlainTextResponse(challenge)

    async def receive_webhook(self, request: Request) -> Response:
        """Authenticate a notification, acknowledge it, then fetch in the background."""
        # The signature covers the exact bytes sent, so read them before parsing
        raw_body = await request.body()
        if not self.webhook_service.authenticate(raw_body, request.headers.get(SIGNATURE_HEADER)):
            return PlainTextResponse("Forbidden", status_code=403)

        if not raw_body.strip():
            logger.info("Webhook notification received with an empty body")
        else:
            try:
                notification = WebhookNotification.model_validate_json(raw_body)
            except ValidationError as e:
                if any(error["type"] == "json_invalid" for error in e.errors()):
                    logger.warning("Rejecting webhook notification whose body is not JSON")
                    return PlainTextResponse("Bad Request", status_code=400)
                # Any JSON shape is acknowledged; the envelope is only used for logging
                logger.info(
                    f"Webhook notification received with an unrecognized shape: "
                    f"{e.error_count()} validation error(s)"
                )
            else:
                logger.info(
                    f"Webhook notification received: object={notification.object}, "
                    f"entries={len(notification.entry)}, fields={notification.changed_fields}"
                )
        return PlainTextResponse(
            "OK", background=BackgroundTask(self.webhook_service.process_notification)
        )

    async def screen(self, _request: Request) -> Response:
        """Render the full-screen display page."""
        html = render_screen(
            self.subscription_service.current(),
            title=self.config.screen_title,
            hint=self.config.screen_hint,
            events_path=EVENTS_PATH,
        )
        return HTMLResponse(str(html))

    async def events(self, request: Request) -> Response:
        """Open a server-sent event stream, snapshot first then live updates."""
        client_info = get_client_info_from_scope(request.scope)
        subscriber = self.subscription_service.open()
        logger.info(
            f"Event stream {subscriber.subscriber_id} opened for ip={client_info.ip}, "
            f"agent={client_info.user_agent}"
        )
        return StreamingResponse(
            event_stream(
                subscriber,
                self.subscription_service.close,
                keepalive_seconds=self.config.subscriber_keepalive_seconds,
            ),
            media_type="text/event-stream",
            headers=SSE_HEADERS,
        )

    async def start(self) -> None:
        """Start the web server."""
        import uvicorn

        config = uvicorn.Config(
            self.build_app(),
            host=self.config.host,
            port=self.config.port,
            log_level="info",
            timeout_graceful_shutdown=self.config.shutdown_grace_seconds,
        )
        self._server = uvicorn.Server(config)
        logger.info(f"Listening on {self.config.host}:{self.config.port}")

        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        self.hub.close_all()
        if self._server:
            self._server.should_exit = True
