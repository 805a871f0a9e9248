"""Core draft models."""

from draftroom.core.models.player import Player, PlayerSummary, STAT_FIELDS
from draftroom.core.models.team import Team

__all__ = [
    "Player",
    "PlayerSummary",
    "STAT_FIELDS",
    "Team",
]
