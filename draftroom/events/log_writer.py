"""Renders published draft events as log lines."""

import logging
from typing import Optional

from draftroom.events.bus import EventBus
from draftroom.events.types import (
    AutoPickEvent,
    DraftCompletedEvent,
    DraftEvent,
    PickEvent,
    SkippedEvent,
)

logger = logging.getLogger("draftroom.draft_log")


def format_event(event: DraftEvent) -> str:
    """One-line human readable description of an event."""
    where = f"R{event.round} #{event.pick_index + 1}"
    if isinstance(event, (PickEvent, AutoPickEvent)) and event.player is not None:
        verb = "auto-drafted" if isinstance(event, AutoPickEvent) else "drafted"
        p = event.player
        return f"[{where}] {event.user_id} {verb} {p.name} ({p.position}, {p.team})"
    if isinstance(event, SkippedEvent):
        return f"[{where}] {event.user_id} skipped"
    if isinstance(event, DraftCompletedEvent):
        return f"Draft complete after {event.total_rounds} rounds ({event.picks_made} picks)"
    return f"[{where}] {type(event).__name__}"


class DraftLogWriter:
    """Bus subscriber that writes every draft event to the draft log."""

    def __init__(self, level: int = logging.INFO, log: Optional[logging.Logger] = None) -> None:
        self.level = level
        self.log = log or logger
        self.lines_written = 0

    def attach(self, bus: EventBus) -> "DraftLogWriter":
        bus.subscribe_all(self)
        return self

    def detach(self, bus: EventBus) -> None:
        bus.unsubscribe_all(self)

    def __call__(self, event: DraftEvent) -> None:
        self.log.log(self.level, format_event(event))
        self.lines_written += 1
