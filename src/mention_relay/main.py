"""Main entry point for the mention relay."""

import asyncio
import logging
import sys

import aiohttp

from mention_relay.adapters.config import AppConfig
from mention_relay.adapters.graph_api import GraphMediaRepository
from mention_relay.adapters.security import HmacSignatureVerifier
from mention_relay.adapters.web import StarletteWebAdapter
from mention_relay.adapters.web.broadcasters import BroadcastHub
from mention_relay.adapters.web.cache import InMemoryLatestValueStore
from mention_relay.application.services import SubscriptionService, WebhookService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()

    if not config.ig_verify_token:
        logger.warning("IG_VERIFY_TOKEN is not set, webhook handshakes will be rejected")
    if not config.upstream_configured:
        logger.warning(
            "IG_ACCESS_TOKEN or IG_USER_ID is not set, notifications will only be acknowledged"
        )

    # One store and one hub per process, shared by every request
    store = InMemoryLatestValueStore()
    hub = BroadcastHub(max_queued_frames=config.subscriber_queue_size)
    verifier = HmacSignatureVerifier(
        config.meta_app_secret, enabled=config.signature_verification_enabled
    )

    # Create aiohttp session for efficient HTTP connections
    async with aiohttp.ClientSession() as session:
        media_repository = (
            GraphMediaRepository.from_config(session, config) if config.upstream_configured else None
        )

        webhook_service = WebhookService(
            verify_token=config.ig_verify_token,
            signature_verifier=verifier,
            store=store,
            hub=hub,
            media_repository=media_repository,
        )
        subscription_service = SubscriptionService(store, hub)

        display_adapter = StarletteWebAdapter(config, webhook_service, subscription_service, hub)

        try:
            await display_adapter.start()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
            await display_adapter.stop()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
