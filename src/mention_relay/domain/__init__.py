"""Domain layer - core models, contracts and ports."""

from mention_relay.domain.models import LatestEvent, MediaRecord
from mention_relay.domain.ports import DisplayAdapter, MentionedMediaRepository

__all__ = [
    "DisplayAdapter",
    "LatestEvent",
    "MediaRecord",
    "MentionedMediaRepository",
]
