"""
Position-Limit Policy.

Decides whether a team may draft a candidate under the per-position caps.
The same check guards direct picks and auto-picks.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional

from draftroom.core.enums import Position
from draftroom.core.models.player import Player
from draftroom.core.models.team import Team
from draftroom.draft.errors import InvalidDraftInputError
from draftroom.draft.rosters import RosterStore


# Standard roster caps; 0 or missing means unlimited
DEFAULT_POSITION_LIMITS = {
    "C": 1,
    "1B": 1,
    "2B": 1,
    "3B": 1,
    "SS": 1,
    "OF": 3,
    "SP": 2,
    "RP": 1,
    "UT": 2,
}

MAX_POSITION_CAP = 20


def validate_position_limits(limits: Mapping[str, int]) -> dict[str, int]:
    """
    Check caps are integers in [0, MAX_POSITION_CAP] for known positions.

    Returns a copy keyed by the position wire value ("of" becomes "OF").
    """
    clean = {}
    for position, cap in limits.items():
        try:
            key = Position.parse(position).value
        except ValueError:
            raise InvalidDraftInputError(f"Unknown position: {position}") from None
        if isinstance(cap, bool) or not isinstance(cap, int):
            raise InvalidDraftInputError(f"Position cap for {position} must be an integer")
        if cap < 0 or cap > MAX_POSITION_CAP:
            raise InvalidDraftInputError(
                f"Position cap for {position} must be between 0 and {MAX_POSITION_CAP}"
            )
        clean[key] = cap
    return clean


@dataclass
class PositionLimits:
    """Enforcement flag plus position -> cap mapping."""

    enforce: bool = True
    caps: dict[str, int] = field(default_factory=lambda: dict(DEFAULT_POSITION_LIMITS))

    def cap_for(self, position: str) -> int:
        """Cap for a position; 0 means unlimited."""
        cap = self.caps.get(position, 0)
        return cap if cap > 0 else 0

    def merge(self, updates: Mapping[str, int]) -> None:
        """Partial update of caps; positions not mentioned keep their cap."""
        self.caps.update(validate_position_limits(updates))


class PositionLimitPolicy:
    """Checks candidates against a team's current roster composition."""

    def __init__(self, limits: PositionLimits, rosters: RosterStore) -> None:
        self.limits = limits
        self.rosters = rosters

    def check(self, team: Team, candidate: Player) -> Optional[str]:
        """
        Check whether a team may draft a candidate.

        Returns:
            A violation message, or None when the pick is allowed
        """
        if not self.limits.enforce:
            return None
        position = candidate.position.value
        cap = self.limits.cap_for(position)
        if cap == 0:
            return None
        current = self.rosters.position_counts(team)[position]
        if current >= cap:
            return f"Position limit reached: max {cap} {position}"
        return None

    def allows(self, team: Team, candidate: Player) -> bool:
        return self.check(team, candidate) is None
