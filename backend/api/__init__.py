"""
DramaDeck API package.

Provides the FastAPI application for the discovery feed engine.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
