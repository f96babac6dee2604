"""Flask JSON API over the project layout engine."""

from .app import create_app

__all__ = ["create_app"]
