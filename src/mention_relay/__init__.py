"""Relay of the latest mentioned Instagram media item to display screens."""

__version__ = "0.1.0"
