"""Web adapters for webhook ingestion and display clients."""

from mention_relay.adapters.web.starlette_app import StarletteWebAdapter

__all__ = ["StarletteWebAdapter"]
