"""
Cartwise API package.

Provides the FastAPI application for the collaborative shopping list service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
