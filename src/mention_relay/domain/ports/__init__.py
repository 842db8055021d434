"""Ports (interfaces) for the ports-and-adapters architecture."""

from mention_relay.domain.ports.display_adapter import DisplayAdapter
from mention_relay.domain.ports.media_repository import MentionedMediaRepository

__all__ = [
    "DisplayAdapter",
    "MentionedMediaRepository",
]
