"""
Draftroom configuration.

Engine defaults, API server settings and the background ticker cadence.
All settings can be overridden via environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


def _env_float(name: str, default: float) -> float:
    return float(os.getenv(name, str(default)))


@dataclass
class DraftConfig:
    """Configuration for the draft engine and its HTTP binding."""

    # Player pool (None = bundled players.json)
    players_path: Optional[str] = field(
        default_factory=lambda: os.getenv("DRAFTROOM_PLAYERS_PATH") or None
    )

    # Engine defaults before a league is initialized
    pick_seconds: int = field(default_factory=lambda: _env_int("DRAFTROOM_PICK_SECONDS", 20))
    default_rounds: int = field(default_factory=lambda: _env_int("DRAFTROOM_DEFAULT_ROUNDS", 15))
    fast_forward_max_steps: int = field(
        default_factory=lambda: _env_int("DRAFTROOM_FAST_FORWARD_MAX_STEPS", 500)
    )

    # Background ticker; 0 disables it and leaves ticking to clients
    tick_interval_seconds: float = field(
        default_factory=lambda: _env_float("DRAFTROOM_TICK_INTERVAL", 1.0)
    )

    # Listing cap for GET /api/players
    player_listing_cap: int = field(default_factory=lambda: _env_int("DRAFTROOM_PLAYER_LISTING_CAP", 50))

    # Server
    host: str = field(default_factory=lambda: os.getenv("DRAFTROOM_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: _env_int("PORT", 3001))
    log_level: str = field(default_factory=lambda: os.getenv("DRAFTROOM_LOG_LEVEL", "INFO").upper())

    @classmethod
    def from_env(cls) -> "DraftConfig":
        """Create config from environment variables."""
        return cls()

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if not 5 <= self.pick_seconds <= 600:
            errors.append("DRAFTROOM_PICK_SECONDS must be between 5 and 600")
        if not 1 <= self.default_rounds <= 40:
            errors.append("DRAFTROOM_DEFAULT_ROUNDS must be between 1 and 40")
        if self.fast_forward_max_steps < 1:
            errors.append("DRAFTROOM_FAST_FORWARD_MAX_STEPS must be at least 1")
        if self.tick_interval_seconds < 0:
            errors.append("DRAFTROOM_TICK_INTERVAL cannot be negative")
        if self.player_listing_cap < 0:
            errors.append("DRAFTROOM_PLAYER_LISTING_CAP cannot be negative")
        if self.players_path and not os.path.exists(self.players_path):
            errors.append(f"DRAFTROOM_PLAYERS_PATH does not exist: {self.players_path}")
        return errors


# Singleton config instance
_config: Optional[DraftConfig] = None


def get_config() -> DraftConfig:
    """Get the global draftroom configuration."""
    global _config
    if _config is None:
        _config = DraftConfig.from_env()
    return _config


def set_config(config: Optional[DraftConfig]) -> None:
    """Replace the global configuration (None resets to environment)."""
    global _config
    _config = config
