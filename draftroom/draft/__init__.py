"""Draft orchestration: turn sequencing, auto-picks, limits and the engine."""

from draftroom.draft.autopick import AutoPickChoice, AutoPickResolver, PickSource
from draftroom.draft.engine import DraftEngine, DraftSettings
from draftroom.draft.errors import (
    AlreadyDraftedError,
    DraftError,
    DuplicatePickError,
    InvalidDraftInputError,
    NotFoundError,
    PlayerNotFoundError,
    PlayerNotOnTeamError,
    RemovalNotAllowedError,
    RosterLimitError,
    TeamNotFoundError,
    TurnViolationError,
)
from draftroom.draft.fast_forward import FastForwardResult, FastForwardSimulator
from draftroom.draft.limits import DEFAULT_POSITION_LIMITS, PositionLimitPolicy, PositionLimits
from draftroom.draft.queues import QueueStore
from draftroom.draft.registry import DraftRegistry
from draftroom.draft.rosters import RosterStore
from draftroom.draft.sequencer import TurnSequencer, TurnState, derive_rounds

__all__ = [
    "AlreadyDraftedError",
    "AutoPickChoice",
    "AutoPickResolver",
    "DEFAULT_POSITION_LIMITS",
    "DraftEngine",
    "DraftError",
    "DraftRegistry",
    "DraftSettings",
    "DuplicatePickError",
    "FastForwardResult",
    "FastForwardSimulator",
    "InvalidDraftInputError",
    "NotFoundError",
    "PickSource",
    "PlayerNotFoundError",
    "PlayerNotOnTeamError",
    "PositionLimitPolicy",
    "PositionLimits",
    "QueueStore",
    "RemovalNotAllowedError",
    "RosterLimitError",
    "RosterStore",
    "TeamNotFoundError",
    "TurnSequencer",
    "TurnState",
    "TurnViolationError",
    "derive_rounds",
]
