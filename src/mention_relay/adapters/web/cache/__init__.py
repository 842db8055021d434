"""Caches for web adapter."""

from mention_relay.adapters.web.cache.latest_value_store import InMemoryLatestValueStore

__all__ = ["InMemoryLatestValueStore"]
