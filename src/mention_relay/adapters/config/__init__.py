"""Configuration adapters."""

from mention_relay.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
