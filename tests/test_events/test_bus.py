"""Tests for the event bus and the draft log writer."""

import logging
from datetime import datetime

import pytest

from draftroom.core.models.player import PlayerSummary
from draftroom.events import (
    AutoPickEvent,
    DraftCompletedEvent,
    DraftEventType,
    EventBus,
    PickEvent,
    SkippedEvent,
    TurnEvent,
    make_turn_event,
)
from draftroom.events.log_writer import DraftLogWriter, format_event


SUMMARY = PlayerSummary(id="p1", name="Aaron Judge", team="NYY", position="OF")


class TestEventBus:
    """Tests for EventBus."""

    def test_typed_subscription(self):
        bus = EventBus()
        picks = []
        bus.subscribe(PickEvent, picks.append)
        bus.emit(PickEvent(user_id="u1", player=SUMMARY))
        bus.emit(SkippedEvent(user_id="u2"))
        assert [e.user_id for e in picks] == ["u1"]

    def test_global_subscription(self):
        bus = EventBus()
        seen = []
        bus.subscribe_all(seen.append)
        bus.emit(PickEvent(user_id="u1"))
        bus.emit(DraftCompletedEvent(total_rounds=3, picks_made=6))
        assert len(seen) == 2

    def test_unsubscribe(self):
        bus = EventBus()
        seen = []
        bus.subscribe(PickEvent, seen.append)
        bus.unsubscribe(PickEvent, seen.append)
        bus.emit(PickEvent(user_id="u1"))
        assert seen == []
        assert bus.handler_count() == 0

    def test_failing_handler_is_logged(self, caplog):
        bus = EventBus()
        seen = []

        def boom(event):
            raise RuntimeError("nope")

        bus.subscribe(PickEvent, boom)
        bus.subscribe_all(seen.append)
        with caplog.at_level(logging.ERROR, logger="draftroom.events.bus"):
            bus.emit(PickEvent(user_id="u1"))
        assert len(seen) == 1
        assert "failed" in caplog.text

    def test_handler_count(self):
        bus = EventBus()
        bus.subscribe(PickEvent, print)
        bus.subscribe_all(print)
        assert bus.handler_count(PickEvent) == 1
        assert bus.handler_count() == 2
        bus.clear()
        assert bus.handler_count() == 0


class TestTurnEvents:
    """Tests for turn event construction."""

    def test_base_turn_event_cannot_be_built(self):
        """Only concrete outcomes carry an event type."""
        with pytest.raises(TypeError):
            TurnEvent(user_id="u1", player=SUMMARY)

    def test_make_turn_event_types(self):
        assert isinstance(make_turn_event(DraftEventType.PICK, "u1", SUMMARY), PickEvent)
        assert isinstance(make_turn_event("AUTOPICK", "u1", SUMMARY), AutoPickEvent)

    def test_skipped_event_drops_player(self):
        event = make_turn_event(DraftEventType.SKIPPED, "u1", SUMMARY)
        assert event.player is None
        assert event.to_dict() == {"type": "SKIPPED", "user_id": "u1"}

    def test_explicit_timestamp(self):
        ts = datetime(2024, 3, 28, 19, 5)
        assert make_turn_event(DraftEventType.PICK, "u1", timestamp=ts).timestamp == ts

    def test_pick_event_dict(self):
        event = make_turn_event(DraftEventType.PICK, "u1", SUMMARY, round=2, pick_index=1)
        assert event.to_dict() == {"type": "PICK", "user_id": "u1", "player": SUMMARY.to_dict()}


class TestDraftLogWriter:
    """Tests for the log subscriber."""

    def test_format_lines(self):
        pick = make_turn_event(DraftEventType.PICK, "u1", SUMMARY, round=2, pick_index=1)
        auto = make_turn_event(DraftEventType.AUTOPICK, "u2", SUMMARY)
        skip = make_turn_event(DraftEventType.SKIPPED, "u3", round=3, pick_index=0)
        assert format_event(pick) == "[R2 #2] u1 drafted Aaron Judge (OF, NYY)"
        assert format_event(auto) == "[R1 #1] u2 auto-drafted Aaron Judge (OF, NYY)"
        assert format_event(skip) == "[R3 #1] u3 skipped"
        done = DraftCompletedEvent(total_rounds=15, picks_made=60)
        assert format_event(done) == "Draft complete after 15 rounds (60 picks)"

    def test_writes_to_draft_log(self, caplog):
        bus = EventBus()
        writer = DraftLogWriter().attach(bus)
        with caplog.at_level(logging.INFO, logger="draftroom.draft_log"):
            bus.emit(make_turn_event(DraftEventType.PICK, "u1", SUMMARY))
        assert writer.lines_written == 1
        assert "u1 drafted Aaron Judge" in caplog.text

    def test_detach(self):
        bus = EventBus()
        writer = DraftLogWriter().attach(bus)
        writer.detach(bus)
        bus.emit(make_turn_event(DraftEventType.PICK, "u1", SUMMARY))
        assert writer.lines_written == 0
