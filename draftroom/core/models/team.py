"""Team model."""

from dataclasses import dataclass, field


@dataclass
class Team:
    """
    A drafting team, owned by one user.

    `picks` holds player ids in the order they were drafted and never
    contains the same id twice. `points` is derived from the picks and is
    recomputed by the roster store whenever the picks change.
    """

    user_id: str
    name: str = ""
    picks: list[str] = field(default_factory=list)
    points: float = 0.0

    def __post_init__(self) -> None:
        if not self.name:
            self.name = default_team_name(self.user_id)

    @property
    def pick_count(self) -> int:
        return len(self.picks)

    def owns(self, player_id: str) -> bool:
        """Check if this team has drafted the player."""
        return player_id in self.picks

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "name": self.name,
            "picks": list(self.picks),
            "points": self.points,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Team":
        return cls(
            user_id=data["user_id"],
            name=data.get("name", ""),
            picks=list(data.get("picks", [])),
            points=data.get("points", 0.0),
        )


def default_team_name(user_id: str) -> str:
    return f"Team {user_id}"
