"""HTTP surface: webhook receiver and health check."""

from .app import create_app, get_handler

__all__ = ["create_app", "get_handler"]
