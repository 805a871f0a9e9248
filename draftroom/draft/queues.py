"""
Queue Store - each user's ordered draft preferences.

A queue is the list the auto-pick resolver walks before falling back to
best available. Queues never hold duplicates, unknown ids, or ids that
are already drafted; drafted players are purged from every queue, not
just the drafter's.
"""

from typing import Iterable

from draftroom.core.catalog import PlayerCatalog
from draftroom.core.models.player import PlayerSummary
from draftroom.draft.errors import InvalidDraftInputError
from draftroom.draft.registry import DraftRegistry

MAX_QUEUE_LENGTH = 200


class QueueStore:
    """Per-user preference lists, sanitized against catalog and registry."""

    def __init__(self, catalog: PlayerCatalog, registry: DraftRegistry) -> None:
        self.catalog = catalog
        self.registry = registry
        self._queues: dict[str, list[str]] = {}

    def ensure(self, user_id: str) -> list[str]:
        return self._queues.setdefault(user_id, [])

    def sanitize(self, player_ids: Iterable[str]) -> list[str]:
        """Drop unknown ids, repeats (first one wins) and drafted ids."""
        seen: set[str] = set()
        clean: list[str] = []
        for pid in player_ids:
            if pid not in self.catalog:
                continue
            if pid in seen:
                continue
            if self.registry.is_drafted(pid):
                continue
            seen.add(pid)
            clean.append(pid)
        return clean

    def set(self, user_id: str, player_ids: Iterable[str]) -> list[str]:
        """Replace a user's queue wholesale. Returns the stored list."""
        player_ids = list(player_ids)
        if len(player_ids) > MAX_QUEUE_LENGTH:
            raise InvalidDraftInputError(
                f"Queue may hold at most {MAX_QUEUE_LENGTH} players (got {len(player_ids)})"
            )
        clean = self.sanitize(player_ids)
        self._queues[user_id] = clean
        return list(clean)

    def get(self, user_id: str) -> list[str]:
        """Current queue with drafted ids pruned (the pruning is persisted)."""
        if user_id not in self._queues:
            return []
        queue = [pid for pid in self._queues[user_id] if not self.registry.is_drafted(pid)]
        self._queues[user_id] = queue
        return list(queue)

    def peek(self, user_id: str) -> list[str]:
        """Stored queue, unpruned and unmodified."""
        return list(self._queues.get(user_id, []))

    def expanded(self, user_id: str) -> list[PlayerSummary]:
        """Pruned queue as player summaries."""
        summaries = []
        for pid in self.get(user_id):
            player = self.catalog.get(pid)
            if player is not None:
                summaries.append(player.summary())
        return summaries

    def purge(self, player_id: str) -> int:
        """Remove a player from every queue. Returns how many queues changed."""
        changed = 0
        for user_id, queue in self._queues.items():
            if player_id in queue:
                self._queues[user_id] = [pid for pid in queue if pid != player_id]
                changed += 1
        return changed

    def clear(self) -> None:
        self._queues.clear()

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._queues
