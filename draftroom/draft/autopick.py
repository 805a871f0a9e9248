"""
Auto-Pick Resolver.

Chooses a player for a user who has run out of time or is being
simulated. Strict priority:

1. The user's queue, in stored order - first undrafted entry that fits
   the position caps.
2. Best available by fantasy points (ties keep catalog order) - first
   that fits the position caps.
3. Nothing. The caller decides what happens to the turn.

The resolver never mutates draft state; the engine commits its choice
through the same path as a direct pick.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping, Optional

from draftroom.core.catalog import PlayerCatalog
from draftroom.core.models.player import Player
from draftroom.core.models.team import Team
from draftroom.core.scoring import score_stats
from draftroom.draft.limits import PositionLimitPolicy
from draftroom.draft.queues import QueueStore
from draftroom.draft.registry import DraftRegistry
from draftroom.draft.rosters import RosterStore


class PickSource(Enum):
    """Where an auto-pick came from."""
    QUEUE = "queue"
    BEST_AVAILABLE = "best_available"


@dataclass(frozen=True)
class AutoPickChoice:
    """A fully resolved auto-pick, ready to commit."""

    player: Player
    source: PickSource
    points: float


class AutoPickResolver:
    """Queue-first, then best-available player selection."""

    def __init__(
        self,
        catalog: PlayerCatalog,
        registry: DraftRegistry,
        rosters: RosterStore,
        queues: QueueStore,
        policy: PositionLimitPolicy,
        score: Callable[[Optional[Mapping[str, float]]], float] = score_stats,
    ) -> None:
        self.catalog = catalog
        self.registry = registry
        self.rosters = rosters
        self.queues = queues
        self.policy = policy
        self.score = score

    def resolve(self, user_id: str) -> Optional[AutoPickChoice]:
        """
        Pick a player for a user without drafting it.

        Args:
            user_id: User whose turn is being resolved

        Returns:
            The chosen player, or None when no eligible player exists
        """
        team = self.rosters.get(user_id) or Team(user_id=user_id)

        choice = self._from_queue(user_id, team)
        if choice is not None:
            return choice
        return self._best_available(team)

    def _from_queue(self, user_id: str, team: Team) -> Optional[AutoPickChoice]:
        for pid in self.queues.peek(user_id):
            if self.registry.is_drafted(pid):
                continue
            player = self.catalog.get(pid)
            if player is None:
                continue
            if not self.policy.allows(team, player):
                continue
            return AutoPickChoice(player, PickSource.QUEUE, self.score(player.stats))
        return None

    def _best_available(self, team: Team) -> Optional[AutoPickChoice]:
        for player, points in self.ranked_available():
            if self.policy.allows(team, player):
                return AutoPickChoice(player, PickSource.BEST_AVAILABLE, points)
        return None

    def ranked_available(self) -> list[tuple[Player, float]]:
        """Undrafted players by points, highest first; ties keep catalog order."""
        available = [
            (p, self.score(p.stats)) for p in self.catalog
            if not self.registry.is_drafted(p.id)
        ]
        available.sort(key=lambda x: x[1], reverse=True)
        return available
