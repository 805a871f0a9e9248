"""Draft Registry - the global set of drafted player ids."""

from typing import Iterator


class DraftRegistry:
    """
    Single source of truth for "is this player still available".

    Keeps insertion order so snapshots list drafted ids in the order they
    were taken. A player id is registered iff exactly one team holds it;
    the roster store and the engine keep the two in step.
    """

    def __init__(self) -> None:
        self._drafted: dict[str, None] = {}

    def is_drafted(self, player_id: str) -> bool:
        return player_id in self._drafted

    def add(self, player_id: str) -> None:
        self._drafted[player_id] = None

    def discard(self, player_id: str) -> bool:
        """Free a player. Returns True if it was registered."""
        if player_id not in self._drafted:
            return False
        del self._drafted[player_id]
        return True

    def clear(self) -> None:
        self._drafted.clear()

    def ids(self) -> list[str]:
        return list(self._drafted)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._drafted

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._drafted))

    def __len__(self) -> int:
        return len(self._drafted)
