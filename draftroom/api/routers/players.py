"""
Player catalog router.

Read-only listing of the draft pool and a scoring preview.
"""

from fastapi import APIRouter, HTTPException, Query

from draftroom.api.schemas.draft import PlayerResponse, ScoredPlayerResponse
from draftroom.api.services.draft_service import get_draft_service
from draftroom.core.scoring import top_players_by_points

router = APIRouter(tags=["players"])


@router.get("/players", response_model=list[PlayerResponse])
async def list_players() -> list[dict]:
    """List the player pool (capped by configuration)."""
    service = get_draft_service()
    return [p.to_dict() for p in service.catalog.listing(service.config.player_listing_cap)]


@router.get("/players/{player_id}", response_model=PlayerResponse)
async def get_player(player_id: str) -> dict:
    """Get a single player."""
    player = get_draft_service().catalog.get(player_id)
    if player is None:
        raise HTTPException(status_code=404, detail="Player not found")
    return player.to_dict()


@router.get("/scoring/top", response_model=list[ScoredPlayerResponse])
async def top_scoring(n: int = Query(5, ge=1, le=100)) -> list[dict]:
    """Top players in the listed pool by fantasy points."""
    service = get_draft_service()
    listed = service.catalog.listing(service.config.player_listing_cap)
    return [
        {**player.to_dict(), "points": points}
        for player, points in top_players_by_points(listed, n)
    ]
