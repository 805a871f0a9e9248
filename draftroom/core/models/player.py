"""Player model."""

from dataclasses import dataclass, field
from typing import Any

from draftroom.core.enums import Position


# Batting and pitching categories understood by the scoring function
BATTING_FIELDS = ("HR", "RBI", "R", "SB", "AVG")
PITCHING_FIELDS = ("W", "SV", "K", "ERA", "WHIP")
STAT_FIELDS = BATTING_FIELDS + PITCHING_FIELDS


@dataclass(frozen=True)
class PlayerSummary:
    """Compact player reference carried on draft events and queue listings."""

    id: str
    name: str
    team: str
    position: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "team": self.team,
            "position": self.position,
        }


@dataclass(frozen=True)
class Player:
    """
    A player in the draft pool.

    Players are read-only; the catalog owns them and the draft only
    references them by id. The stat bag is sparse - missing categories
    simply contribute nothing to the score.
    """

    id: str
    name: str
    team: str = ""  # Real-world team code, e.g. "NYY"
    position: Position = Position.UT
    stats: dict[str, float] = field(default_factory=dict)

    @property
    def is_pitcher(self) -> bool:
        return self.position.is_pitcher

    def summary(self) -> PlayerSummary:
        """Compact summary used for events and queues."""
        return PlayerSummary(
            id=self.id,
            name=self.name,
            team=self.team,
            position=self.position.value,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "team": self.team,
            "position": self.position.value,
            "stats": dict(self.stats),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Player":
        # Unknown stat keys and non-numeric values are dropped
        stats = {}
        for key, value in (data.get("stats") or {}).items():
            if key in STAT_FIELDS and isinstance(value, (int, float)) and not isinstance(value, bool):
                stats[key] = value
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            team=data.get("team", ""),
            position=Position.parse(data.get("position", "UT")),
            stats=stats,
        )
