"""Graph API adapter."""

from mention_relay.adapters.graph_api.graph_media_repository import GraphMediaRepository

__all__ = ["GraphMediaRepository"]
