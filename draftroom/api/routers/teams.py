"""Team router: roster detail and standings."""

from fastapi import APIRouter

from draftroom.api.schemas.draft import TeamDetailResponse, TeamStandingResponse
from draftroom.api.services.draft_service import get_engine
from draftroom.draft.errors import DraftError
from .deps import draft_error_to_http

router = APIRouter(tags=["teams"])


@router.get("/team/{user_id}", response_model=TeamDetailResponse)
async def get_team(user_id: str) -> dict:
    """Team roster with per-player points."""
    try:
        return get_engine().get_team(user_id)
    except DraftError as e:
        raise draft_error_to_http(e)


@router.get("/teams", response_model=list[TeamStandingResponse])
async def list_teams() -> list[dict]:
    """All teams, highest points first."""
    return get_engine().list_teams_sorted()
