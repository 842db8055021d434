"""Adapters layer - external system integrations."""

from mention_relay.adapters.config import AppConfig
from mention_relay.adapters.graph_api import GraphMediaRepository
from mention_relay.adapters.security import HmacSignatureVerifier

__all__ = [
    "AppConfig",
    "GraphMediaRepository",
    "HmacSignatureVerifier",
]
