"""Pydantic schemas for the draft API."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# === Enums ===

class PositionSchema(str, Enum):
    """Roster positions for API."""
    C = "C"
    FIRST_BASE = "1B"
    SECOND_BASE = "2B"
    THIRD_BASE = "3B"
    SS = "SS"
    OF = "OF"
    UT = "UT"
    SP = "SP"
    RP = "RP"


class DraftEventTypeSchema(str, Enum):
    """Last-event kinds for API."""
    PICK = "PICK"
    AUTOPICK = "AUTOPICK"
    SKIPPED = "SKIPPED"


# === Players ===

class PlayerSummaryResponse(BaseModel):
    """Compact player reference."""
    id: str
    name: str
    team: str
    position: PositionSchema


class PlayerResponse(PlayerSummaryResponse):
    """Full catalog player."""
    stats: dict[str, float] = Field(default_factory=dict)


class ScoredPlayerResponse(PlayerResponse):
    """Catalog player with computed fantasy points."""
    points: float


# === Request Schemas ===

class TeamSeed(BaseModel):
    """A seat in a new league."""
    user_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)


class InitLeagueRequest(BaseModel):
    """Request to initialize a league draft."""
    teams: list[TeamSeed] = Field(..., min_length=2, description="Seats in first-round order")
    rounds: Optional[int] = Field(None, ge=1, le=40, description="Omit to derive from pool size")
    pick_seconds: Optional[int] = Field(None, ge=5, le=600)
    auto_pick: Optional[bool] = None
    enforce_limits: Optional[bool] = None
    position_limits: Optional[dict[PositionSchema, int]] = Field(
        None, description="Per-position caps (0-20) merged over the defaults"
    )
    allow_remove_anytime: Optional[bool] = None


class SetHumanRequest(BaseModel):
    """Designate the human-controlled seat; omit user_id to clear it."""
    user_id: Optional[str] = None


class PickRequest(BaseModel):
    """Draft or drop a player."""
    user_id: str
    player_id: str


class UpdateSettingsRequest(BaseModel):
    """Partial draft settings update."""
    pick_seconds: Optional[int] = Field(None, ge=5, le=600)
    auto_pick: Optional[bool] = None
    enforce_limits: Optional[bool] = None
    position_limits: Optional[dict[PositionSchema, int]] = None
    allow_remove_anytime: Optional[bool] = None


class ResetTeamRequest(BaseModel):
    user_id: str


class SetQueueRequest(BaseModel):
    """Replace a user's queue."""
    user_id: str
    player_ids: list[str] = Field(..., max_length=200)


# === Response Schemas ===

class DraftEventResponse(BaseModel):
    """The single retained last event."""
    type: DraftEventTypeSchema
    user_id: str
    player: Optional[PlayerSummaryResponse] = None


class DraftStateResponse(BaseModel):
    """Full draft snapshot."""
    is_active: bool
    on_the_clock_user_id: Optional[str] = None
    pick_ends_at: Optional[float] = Field(None, description="Epoch seconds")
    seconds_remaining: Optional[float] = None
    pick_seconds: int
    order: list[str]
    round: int
    pick_index: int
    direction: int
    total_rounds: int
    human_user_id: Optional[str] = None
    auto_pick: bool
    enforce_limits: bool
    position_limits: dict[PositionSchema, int]
    allow_remove_anytime: bool
    drafted_ids: list[str]
    last_event: Optional[DraftEventResponse] = None
    fast_forward_exhausted: bool = False


class TeamStandingResponse(BaseModel):
    user_id: str
    name: str
    points: float


class TeamResponse(BaseModel):
    """Raw team record."""
    user_id: str
    name: str
    picks: list[str]
    points: float


class LeagueInitResponse(BaseModel):
    ok: bool = True
    draft: DraftStateResponse
    teams: list[TeamStandingResponse]


class SetHumanResponse(BaseModel):
    ok: bool = True
    draft: DraftStateResponse


class PickResponse(BaseModel):
    ok: bool = True
    team: TeamResponse


class TeamChangeResponse(BaseModel):
    """Result of a removal or a team reset."""
    ok: bool = True
    team: TeamResponse
    draft: DraftStateResponse


class RosterPlayerResponse(PlayerResponse):
    """A drafted player with points; unknown players are placeholders."""
    points: float
    status: str


class TeamDetailResponse(BaseModel):
    user_id: str
    team_name: str
    total_points: float
    players: list[RosterPlayerResponse]


class QueueResponse(BaseModel):
    user_id: str
    queue: list[PlayerSummaryResponse]


class SetQueueResponse(BaseModel):
    ok: bool = True
    user_id: str
    count: int
