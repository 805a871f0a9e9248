"""Event types for the draft."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from draftroom.core.models.player import PlayerSummary


class DraftEventType(str, Enum):
    """Kinds of turn outcome that can be the draft's last event."""
    PICK = "PICK"
    AUTOPICK = "AUTOPICK"
    SKIPPED = "SKIPPED"


@dataclass
class DraftEvent:
    """Base class for all draft events."""

    timestamp: datetime = field(default_factory=datetime.now)
    round: int = 1
    pick_index: int = 0


@dataclass
class TurnEvent(DraftEvent, ABC):
    """
    Outcome of a single turn.

    Exactly one of these is retained by the engine as the last event;
    every published one also goes out on the bus.
    """

    user_id: str = ""
    player: Optional[PlayerSummary] = None

    @property
    @abstractmethod
    def event_type(self) -> DraftEventType:
        """Kind of turn outcome; defined by each concrete event."""

    def to_dict(self) -> dict:
        data = {"type": self.event_type.value, "user_id": self.user_id}
        if self.player is not None:
            data["player"] = self.player.to_dict()
        return data


@dataclass
class PickEvent(TurnEvent):
    """Fired when a user drafts a player directly."""

    @property
    def event_type(self) -> DraftEventType:
        return DraftEventType.PICK


@dataclass
class AutoPickEvent(TurnEvent):
    """Fired when the engine drafts on a user's behalf."""

    @property
    def event_type(self) -> DraftEventType:
        return DraftEventType.AUTOPICK


@dataclass
class SkippedEvent(TurnEvent):
    """Fired when a turn passes without a pick."""

    @property
    def event_type(self) -> DraftEventType:
        return DraftEventType.SKIPPED


@dataclass
class DraftCompletedEvent(DraftEvent):
    """Fired when the final round overflows and the draft goes inactive."""

    total_rounds: int = 0
    picks_made: int = 0


def make_turn_event(
    event_type: DraftEventType,
    user_id: str,
    player: Optional[PlayerSummary] = None,
    round: int = 1,
    pick_index: int = 0,
    timestamp: Optional[datetime] = None,
) -> TurnEvent:
    """Build the concrete TurnEvent for an event type."""
    cls = {
        DraftEventType.PICK: PickEvent,
        DraftEventType.AUTOPICK: AutoPickEvent,
        DraftEventType.SKIPPED: SkippedEvent,
    }[DraftEventType(event_type)]
    if cls is SkippedEvent:
        player = None
    event = cls(user_id=user_id, player=player, round=round, pick_index=pick_index)
    if timestamp is not None:
        event.timestamp = timestamp
    return event
