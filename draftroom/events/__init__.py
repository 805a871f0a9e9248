"""Event system for draft notifications."""

from draftroom.events.bus import EventBus
from draftroom.events.types import (
    AutoPickEvent,
    DraftCompletedEvent,
    DraftEvent,
    DraftEventType,
    PickEvent,
    SkippedEvent,
    TurnEvent,
    make_turn_event,
)

__all__ = [
    "AutoPickEvent",
    "DraftCompletedEvent",
    "DraftEvent",
    "DraftEventType",
    "EventBus",
    "PickEvent",
    "SkippedEvent",
    "TurnEvent",
    "make_turn_event",
]
