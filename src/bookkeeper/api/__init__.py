"""JSON REST API for bookkeeper."""

from bookkeeper.api.app import create_app

__all__ = ["create_app"]
