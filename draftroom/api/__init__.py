"""Draftroom API package - FastAPI binding for the draft engine."""

from draftroom.api.main import app, create_app

__all__ = ["app", "create_app"]
