"""Shared pytest fixtures for draftroom tests."""

import pytest

from draftroom.config import DraftConfig
from draftroom.core.catalog import PlayerCatalog
from draftroom.draft.engine import DraftEngine


# =============================================================================
# Clock
# =============================================================================


class FakeClock:
    """Manually advanced clock, in epoch seconds."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# =============================================================================
# Player Fixtures
# =============================================================================

# Points: of1 160, of2 140, of3 120, sp1 105, of4 100, 1b1 88, c1 80, ss1 72, rp1 50
SMALL_POOL = [
    {"id": "of1", "name": "Outfield One", "team": "NYY", "position": "OF", "stats": {"HR": 40}},
    {"id": "of2", "name": "Outfield Two", "team": "LAD", "position": "OF", "stats": {"HR": 35}},
    {"id": "of3", "name": "Outfield Three", "team": "ATL", "position": "OF", "stats": {"HR": 30}},
    {"id": "sp1", "name": "Starter One", "team": "HOU", "position": "SP", "stats": {"W": 10, "K": 55}},
    {"id": "of4", "name": "Outfield Four", "team": "SEA", "position": "OF", "stats": {"HR": 25}},
    {"id": "1b1", "name": "First Base One", "team": "PHI", "position": "1B", "stats": {"HR": 22}},
    {"id": "c1", "name": "Catcher One", "team": "SD", "position": "C", "stats": {"HR": 20}},
    {"id": "ss1", "name": "Shortstop One", "team": "TEX", "position": "SS", "stats": {"HR": 18}},
    {"id": "rp1", "name": "Reliever One", "team": "CLE", "position": "RP", "stats": {"SV": 10}},
]


@pytest.fixture
def pool_records() -> list[dict]:
    return [dict(r) for r in SMALL_POOL]


@pytest.fixture
def catalog(pool_records) -> PlayerCatalog:
    """Nine-player catalog with distinct scores."""
    return PlayerCatalog.from_records(pool_records)


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def config() -> DraftConfig:
    return DraftConfig(
        players_path=None,
        pick_seconds=20,
        default_rounds=15,
        fast_forward_max_steps=500,
        tick_interval_seconds=0,
        player_listing_cap=50,
    )


@pytest.fixture
def make_engine(catalog, config, clock):
    """Factory for engines sharing the fake clock."""

    def _make(catalog_override: PlayerCatalog = None, **config_overrides) -> DraftEngine:
        cfg = config
        if config_overrides:
            cfg = DraftConfig(**{**config.__dict__, **config_overrides})
        return DraftEngine(catalog if catalog_override is None else catalog_override, config=cfg, clock=clock)

    return _make


@pytest.fixture
def engine(make_engine) -> DraftEngine:
    """Engine in its process-start state."""
    return make_engine()


@pytest.fixture
def league(engine) -> DraftEngine:
    """Two-team, two-round league with 20 second picks."""
    engine.init_league(["u1", "u2"], rounds=2, pick_seconds=20)
    return engine
