"""
Player Catalog.

Static, read-only pool of draftable players, loaded once from JSON.
Iteration order is file order and is used as the tie-break wherever
players with equal scores have to be ordered.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from draftroom.core.models.player import Player

logger = logging.getLogger(__name__)

DEFAULT_PLAYERS_PATH = Path(__file__).resolve().parent.parent / "data" / "players.json"


class PlayerCatalog:
    """Lookup-by-id and ordered iteration over every player in the pool."""

    def __init__(self, players: Iterable[Player] = ()) -> None:
        self._players: list[Player] = []
        self._by_id: dict[str, Player] = {}
        for player in players:
            if player.id in self._by_id:
                raise ValueError(f"Duplicate player id in catalog: {player.id}")
            self._players.append(player)
            self._by_id[player.id] = player

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> "PlayerCatalog":
        return cls(Player.from_dict(r) for r in records)

    @classmethod
    def from_json_file(cls, path: Union[str, Path, None] = None) -> "PlayerCatalog":
        """
        Load a catalog from a JSON array of player records.

        Args:
            path: JSON file to read; defaults to the bundled pool

        Returns:
            Loaded catalog
        """
        path = Path(path) if path else DEFAULT_PLAYERS_PATH
        with open(path, encoding="utf-8") as f:
            records = json.load(f)
        if not isinstance(records, list):
            raise ValueError(f"Expected a JSON array of players in {path}")
        catalog = cls.from_records(records)
        logger.info("Loaded %d players from %s", len(catalog), path)
        return catalog

    def get(self, player_id: str) -> Optional[Player]:
        """Get a player by id, or None if not in the pool."""
        return self._by_id.get(player_id)

    def ids(self) -> list[str]:
        return [p.id for p in self._players]

    def listing(self, limit: Optional[int] = None) -> list[Player]:
        """Players in catalog order, optionally capped."""
        if limit is None:
            return list(self._players)
        return self._players[:max(0, limit)]

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._by_id
