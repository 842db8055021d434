"""Domain models for the mention relay."""

from mention_relay.domain.models.client_info import ClientInfo
from mention_relay.domain.models.error_details import ErrorDetails, UpstreamFetchError
from mention_relay.domain.models.latest_event import LatestEvent
from mention_relay.domain.models.media_record import MediaRecord
from mention_relay.domain.models.webhook_notification import WebhookNotification

__all__ = [
    "ClientInfo",
    "ErrorDetails",
    "LatestEvent",
    "MediaRecord",
    "UpstreamFetchError",
    "WebhookNotification",
]
