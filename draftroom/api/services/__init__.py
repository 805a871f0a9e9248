"""API services for the draft engine."""

from draftroom.api.services.draft_service import DraftService, DraftTicker

__all__ = ["DraftService", "DraftTicker"]
