"""Views for web adapter."""

from mention_relay.adapters.web.views.screen import render_screen

__all__ = ["render_screen"]
