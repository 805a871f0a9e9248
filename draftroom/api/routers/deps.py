"""
Shared dependencies for draft routers.

Maps engine errors onto HTTP responses and request shapes onto engine
arguments.
"""

from typing import Optional

from fastapi import HTTPException

from draftroom.api.schemas.draft import PositionSchema
from draftroom.draft.errors import DraftError, NotFoundError


def draft_error_to_http(error: DraftError) -> HTTPException:
    """
    Convert a draft rule violation into an HTTPException.

    Lookups that found nothing are 404; every other rule violation is 400.
    """
    status = 404 if isinstance(error, NotFoundError) else 400
    return HTTPException(status_code=status, detail=str(error))


def position_caps(limits: Optional[dict[PositionSchema, int]]) -> Optional[dict[str, int]]:
    """Schema position keys to the engine's wire strings."""
    if limits is None:
        return None
    return {position.value: cap for position, cap in limits.items()}
