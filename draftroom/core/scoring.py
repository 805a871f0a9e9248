"""
Fantasy Scoring.

Single source of truth for turning a stat bag into fantasy points.

Batting:  HR x4, RBI x1, R x1, SB x2, AVG x10
Pitching: W x5, SV x5, K x1
Ratio bonuses (clamped at zero):
    ERA  -> max(0, 4.0 - ERA) x2
    WHIP -> max(0, 1.3 - WHIP) x5
"""

import math
from typing import Iterable, Mapping, Optional, TypeVar

from draftroom.core.models.player import Player


# Counting-stat weights
STAT_WEIGHTS = {
    "HR": 4.0,
    "RBI": 1.0,
    "R": 1.0,
    "SB": 2.0,
    "AVG": 10.0,
    "W": 5.0,
    "SV": 5.0,
    "K": 1.0,
}

# Ratio stats score against a baseline; worse than baseline earns nothing
ERA_BASELINE = 4.0
ERA_WEIGHT = 2.0
WHIP_BASELINE = 1.3
WHIP_WEIGHT = 5.0

P = TypeVar("P", bound=Player)


def round_points(value: float) -> float:
    """Round to 2 decimals, halves rounding up (matches client display)."""
    return math.floor(value * 100 + 0.5) / 100


def score_stats(stats: Optional[Mapping[str, float]]) -> float:
    """Score a single stat bag."""
    if not stats:
        return 0.0

    pts = 0.0
    for key, weight in STAT_WEIGHTS.items():
        value = stats.get(key)
        if value:
            pts += value * weight

    era = stats.get("ERA")
    if isinstance(era, (int, float)):
        pts += max(0.0, ERA_BASELINE - era) * ERA_WEIGHT

    whip = stats.get("WHIP")
    if isinstance(whip, (int, float)):
        pts += max(0.0, WHIP_BASELINE - whip) * WHIP_WEIGHT

    return round_points(pts)


def score_player(player: Player) -> float:
    """Score a player by their stat bag."""
    return score_stats(player.stats)


def calc_team_points(players: Iterable[Player]) -> float:
    """Sum points over a set of players."""
    return round_points(sum(score_stats(p.stats) for p in players))


def top_players_by_points(players: Iterable[P], n: int = 5) -> list[tuple[P, float]]:
    """
    Return the top N players by computed points.

    Ties keep the input order (stable sort).
    """
    scored = [(p, score_stats(p.stats)) for p in players]
    scored.sort(key=lambda x: x[1], reverse=True)
    return scored[:max(0, n)]
