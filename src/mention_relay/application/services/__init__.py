"""Application services (use cases) for the relay."""

from mention_relay.application.services.subscription_service import SubscriptionService
from mention_relay.application.services.webhook_service import WebhookService

__all__ = ["SubscriptionService", "WebhookService"]
