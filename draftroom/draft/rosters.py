"""
Roster Store.

Owns every team's drafted-player list and keeps each team's point total
in step with its picks.
"""

from collections import Counter
from typing import Callable, Iterator, Mapping, Optional

from draftroom.core.catalog import PlayerCatalog
from draftroom.core.models.team import Team
from draftroom.core.scoring import round_points, score_stats
from draftroom.draft.errors import TeamNotFoundError

ScoreFn = Callable[[Optional[Mapping[str, float]]], float]


class RosterStore:
    """Teams keyed by owning user id, in creation order."""

    def __init__(self, catalog: PlayerCatalog, score: ScoreFn = score_stats) -> None:
        self.catalog = catalog
        self.score = score
        self._teams: dict[str, Team] = {}

    def ensure_team(self, user_id: str, name: Optional[str] = None) -> Team:
        """Get a team, creating it on first reference."""
        team = self._teams.get(user_id)
        if team is None:
            team = Team(user_id=user_id, name=name or "")
            self._teams[user_id] = team
        return team

    def get(self, user_id: str) -> Optional[Team]:
        return self._teams.get(user_id)

    def require(self, user_id: str) -> Team:
        team = self._teams.get(user_id)
        if team is None:
            raise TeamNotFoundError(user_id)
        return team

    def add_pick(self, team: Team, player_id: str) -> None:
        team.picks.append(player_id)
        self.recalc(team)

    def remove_pick(self, team: Team, player_id: str) -> bool:
        """Remove a pick. Returns True if the team held the player."""
        if player_id not in team.picks:
            return False
        team.picks.remove(player_id)
        self.recalc(team)
        return True

    def clear_picks(self, team: Team) -> list[str]:
        """Empty a team's roster, returning the ids it held."""
        freed = list(team.picks)
        team.picks = []
        self.recalc(team)
        return freed

    def recalc(self, team: Team) -> float:
        """Recompute a team's point total from its picks."""
        total = 0.0
        for pid in team.picks:
            player = self.catalog.get(pid)
            if player is not None:
                total += self.score(player.stats)
        team.points = round_points(total)
        return team.points

    def position_counts(self, team: Team) -> Counter:
        """Picks per position value; ids missing from the catalog are ignored."""
        counts: Counter = Counter()
        for pid in team.picks:
            player = self.catalog.get(pid)
            if player is not None:
                counts[player.position.value] += 1
        return counts

    def standings(self) -> list[Team]:
        """Teams sorted by points, highest first (ties keep creation order)."""
        return sorted(self._teams.values(), key=lambda t: t.points, reverse=True)

    def clear(self) -> None:
        self._teams.clear()

    def __iter__(self) -> Iterator[Team]:
        return iter(list(self._teams.values()))

    def __len__(self) -> int:
        return len(self._teams)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._teams
