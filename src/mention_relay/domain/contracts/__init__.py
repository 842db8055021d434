"""Contracts (protocols) for the event distribution core."""

from mention_relay.domain.contracts.broadcast_hub import BroadcastHubProtocol
from mention_relay.domain.contracts.latest_value_store import LatestValueStoreProtocol
from mention_relay.domain.contracts.signature_verifier import SignatureVerifierProtocol
from mention_relay.domain.contracts.subscriber import SubscriberProtocol
from mention_relay.domain.contracts.subscription_manager import SubscriptionManagerProtocol
from mention_relay.domain.contracts.webhook_handler import WebhookHandlerProtocol

__all__ = [
    "BroadcastHubProtocol",
    "LatestValueStoreProtocol",
    "SignatureVerifierProtocol",
    "SubscriberProtocol",
    "SubscriptionManagerProtocol",
    "WebhookHandlerProtocol",
]
