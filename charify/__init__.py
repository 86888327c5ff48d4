"""Charify request-scoped chat server."""

__version__ = "1.0.0"
