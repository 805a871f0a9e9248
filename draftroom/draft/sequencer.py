"""
Turn Sequencer.

Owns draft progress - round, pick index, direction, who is on the clock
and when their turn expires - and moves it forward under snake rules:
the order runs forward in odd rounds and backward in even rounds, so the
last picker of one round picks first in the next.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from draftroom.events.types import TurnEvent

DEFAULT_PICK_SECONDS = 20
DEFAULT_ROUNDS = 15
MIN_ROUNDS = 1
MAX_ROUNDS = 40
MIN_PICK_SECONDS = 5
MAX_PICK_SECONDS = 600

Clock = Callable[[], float]


def derive_rounds(pool_size: int, team_count: int) -> int:
    """
    Number of rounds that fits the player pool.

    floor(pool_size / team_count), clamped to [MIN_ROUNDS, MAX_ROUNDS].
    Falls back to DEFAULT_ROUNDS when there are no teams.
    """
    if team_count <= 0:
        return DEFAULT_ROUNDS
    return max(MIN_ROUNDS, min(MAX_ROUNDS, pool_size // team_count))


@dataclass
class TurnState:
    """Progress of the draft. Mutated only by the sequencer and the engine."""

    is_active: bool = True
    on_the_clock_user_id: Optional[str] = None
    pick_ends_at: Optional[float] = None  # Absolute clock time, seconds
    pick_seconds: int = DEFAULT_PICK_SECONDS
    order: list[str] = field(default_factory=lambda: ["u1"])
    round: int = 1
    pick_index: int = 0
    direction: int = 1  # +1 forward, -1 backward
    total_rounds: int = DEFAULT_ROUNDS
    human_user_id: Optional[str] = None
    last_event: Optional[TurnEvent] = None

    @property
    def overall_pick(self) -> int:
        """1-based overall pick number of the seat on the clock."""
        seat = self.pick_index if self.direction == 1 else len(self.order) - 1 - self.pick_index
        return (self.round - 1) * len(self.order) + seat + 1

    def to_dict(self) -> dict:
        return {
            "is_active": self.is_active,
            "on_the_clock_user_id": self.on_the_clock_user_id,
            "pick_ends_at": self.pick_ends_at,
            "pick_seconds": self.pick_seconds,
            "order": list(self.order),
            "round": self.round,
            "pick_index": self.pick_index,
            "direction": self.direction,
            "total_rounds": self.total_rounds,
            "human_user_id": self.human_user_id,
            "last_event": self.last_event.to_dict() if self.last_event else None,
        }


class TurnSequencer:
    """Computes the next turn and keeps the pick deadline."""

    def __init__(self, state: Optional[TurnState] = None, clock: Clock = time.time) -> None:
        self.state = state or TurnState()
        self.clock = clock

    def now(self) -> float:
        return self.clock()

    def start(self, order: Optional[list[str]] = None) -> None:
        """Put the first seat of round 1 on the clock."""
        s = self.state
        if order is not None:
            s.order = list(order)
        s.is_active = True
        s.round = 1
        s.direction = 1
        s.pick_index = 0
        s.on_the_clock_user_id = s.order[0]
        s.last_event = None
        self.refresh_deadline()

    def advance(self) -> Optional[str]:
        """
        Move to the next turn.

        Returns:
            The user now on the clock, or None if the draft just ended
        """
        s = self.state
        if not s.is_active:
            return None

        s.pick_index += s.direction

        if s.pick_index < 0 or s.pick_index >= len(s.order):
            s.round += 1
            if s.round > s.total_rounds:
                self.finish()
                return None
            s.direction = -s.direction
            s.pick_index = 0 if s.direction == 1 else len(s.order) - 1

        s.on_the_clock_user_id = s.order[s.pick_index]
        self.refresh_deadline()
        return s.on_the_clock_user_id

    def finish(self) -> None:
        """Terminal transition: nobody on the clock, no deadline, no last event."""
        s = self.state
        s.is_active = False
        s.on_the_clock_user_id = None
        s.pick_ends_at = None
        s.last_event = None

    def refresh_deadline(self) -> None:
        """Restart the clock for whoever is on it."""
        if self.state.on_the_clock_user_id is None:
            self.state.pick_ends_at = None
            return
        self.state.pick_ends_at = self.now() + self.state.pick_seconds

    def is_expired(self) -> bool:
        s = self.state
        return s.pick_ends_at is not None and self.now() >= s.pick_ends_at

    def seconds_remaining(self) -> Optional[float]:
        if self.state.pick_ends_at is None:
            return None
        return max(0.0, self.state.pick_ends_at - self.now())
