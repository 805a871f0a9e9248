"""
Draft router.

League setup, turn resolution and roster changes:
- League initialization and settings
- Draft state and human seat
- Picks, removals and resets
- Clock ticks
"""

from fastapi import APIRouter

from draftroom.api.schemas.draft import (
    DraftStateResponse,
    InitLeagueRequest,
    LeagueInitResponse,
    PickRequest,
    PickResponse,
    ResetTeamRequest,
    SetHumanRequest,
    SetHumanResponse,
    TeamChangeResponse,
    UpdateSettingsRequest,
)
from draftroom.api.services.draft_service import get_engine
from draftroom.draft.errors import DraftError
from .deps import draft_error_to_http, position_caps

router = APIRouter(tags=["draft"])


@router.post("/league/init", response_model=LeagueInitResponse)
async def init_league(request: InitLeagueRequest) -> dict:
    """
    Initialize a league and start its draft.

    Clears all rosters, drafted players and queues.
    """
    try:
        result = get_engine().init_league(
            order=[t.user_id for t in request.teams],
            names={t.user_id: t.name for t in request.teams},
            rounds=request.rounds,
            pick_seconds=request.pick_seconds,
            auto_pick=request.auto_pick,
            enforce_limits=request.enforce_limits,
            position_limits=position_caps(request.position_limits),
            allow_remove_anytime=request.allow_remove_anytime,
        )
    except DraftError as e:
        raise draft_error_to_http(e)
    return {"ok": True, **result}


@router.get("/draft/state", response_model=DraftStateResponse)
async def get_draft_state() -> dict:
    return get_engine().get_state()


@router.post("/draft/human", response_model=SetHumanResponse)
async def set_human(request: SetHumanRequest) -> dict:
    """Designate the human seat; all other seats are auto-played up to it."""
    try:
        draft = get_engine().set_human(request.user_id)
    except DraftError as e:
        raise draft_error_to_http(e)
    return {"ok": True, "draft": draft}


@router.post("/draft/tick", response_model=DraftStateResponse)
async def tick() -> dict:
    """Resolve an expired turn, if any."""
    return get_engine().tick()


@router.post("/draft/pick", response_model=PickResponse)
async def pick(request: PickRequest) -> dict:
    """Draft a player for the user on the clock."""
    try:
        team = get_engine().pick(request.user_id, request.player_id)
    except DraftError as e:
        raise draft_error_to_http(e)
    return {"ok": True, "team": team}


@router.post("/draft/remove", response_model=TeamChangeResponse)
async def remove(request: PickRequest) -> dict:
    """Drop a player from a roster and return them to the pool."""
    try:
        result = get_engine().remove(request.user_id, request.player_id)
    except DraftError as e:
        raise draft_error_to_http(e)
    return {"ok": True, **result}


@router.post("/draft/settings", response_model=SetHumanResponse)
async def update_settings(request: UpdateSettingsRequest) -> dict:
    """Change draft settings; a new pick duration restarts the current clock."""
    try:
        draft = get_engine().update_settings(
            pick_seconds=request.pick_seconds,
            auto_pick=request.auto_pick,
            enforce_limits=request.enforce_limits,
            position_limits=position_caps(request.position_limits),
            allow_remove_anytime=request.allow_remove_anytime,
        )
    except DraftError as e:
        raise draft_error_to_http(e)
    return {"ok": True, "draft": draft}


@router.post("/draft/reset", response_model=LeagueInitResponse)
async def reset_draft() -> dict:
    """Clear all picks and restart at round 1."""
    return {"ok": True, **get_engine().reset_draft()}


@router.post("/draft/resetTeam", response_model=TeamChangeResponse)
async def reset_team(request: ResetTeamRequest) -> dict:
    """Clear one team's picks."""
    try:
        result = get_engine().reset_team(request.user_id)
    except DraftError as e:
        raise draft_error_to_http(e)
    return {"ok": True, **result}
