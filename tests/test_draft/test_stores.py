"""Tests for the draft registry, roster store and queue store."""

import pytest

from draftroom.draft.errors import InvalidDraftInputError, TeamNotFoundError
from draftroom.draft.queues import MAX_QUEUE_LENGTH, QueueStore
from draftroom.draft.registry import DraftRegistry
from draftroom.draft.rosters import RosterStore


@pytest.fixture
def registry() -> DraftRegistry:
    return DraftRegistry()


@pytest.fixture
def queues(catalog, registry) -> QueueStore:
    return QueueStore(catalog, registry)


class TestDraftRegistry:
    """Tests for the drafted-id set."""

    def test_add_and_discard(self, registry):
        registry.add("p1")
        assert registry.is_drafted("p1")
        assert "p1" in registry
        assert registry.discard("p1")
        assert not registry.discard("p1")
        assert len(registry) == 0

    def test_ids_keep_draft_order(self, registry):
        for pid in ("c", "a", "b"):
            registry.add(pid)
        assert registry.ids() == ["c", "a", "b"]


class TestRosterStore:
    """Tests for team rosters and points."""

    def test_ensure_team_creates_once(self, catalog):
        rosters = RosterStore(catalog)
        first = rosters.ensure_team("u1", "Bombers")
        assert rosters.ensure_team("u1", "Other") is first
        assert first.name == "Bombers"

    def test_points_follow_picks(self, catalog):
        rosters = RosterStore(catalog)
        team = rosters.ensure_team("u1")
        rosters.add_pick(team, "of1")
        rosters.add_pick(team, "rp1")
        assert team.points == 210.0
        assert rosters.remove_pick(team, "of1")
        assert team.points == 50.0
        assert not rosters.remove_pick(team, "of1")

    def test_clear_picks_returns_freed_ids(self, catalog):
        rosters = RosterStore(catalog)
        team = rosters.ensure_team("u1")
        rosters.add_pick(team, "c1")
        rosters.add_pick(team, "ss1")
        assert rosters.clear_picks(team) == ["c1", "ss1"]
        assert team.picks == []
        assert team.points == 0.0

    def test_require_missing_team(self, catalog):
        with pytest.raises(TeamNotFoundError):
            RosterStore(catalog).require("nobody")

    def test_standings_sorted_stably(self, catalog):
        rosters = RosterStore(catalog)
        rosters.ensure_team("u1")
        rosters.ensure_team("u2")
        rosters.add_pick(rosters.ensure_team("u3"), "rp1")
        assert [t.user_id for t in rosters.standings()] == ["u3", "u1", "u2"]


class TestQueueStore:
    """Tests for per-user queues."""

    def test_set_sanitizes(self, queues, registry):
        registry.add("of2")
        stored = queues.set("u1", ["of1", "ghost", "of1", "of2", "c1"])
        assert stored == ["of1", "c1"]

    def test_set_rejects_oversized_queue(self, queues):
        with pytest.raises(InvalidDraftInputError):
            queues.set("u1", ["of1"] * (MAX_QUEUE_LENGTH + 1))

    def test_set_accepts_max_length(self, queues):
        assert queues.set("u1", ["of1"] * MAX_QUEUE_LENGTH) == ["of1"]

    def test_get_prunes_and_persists(self, queues, registry):
        queues.set("u1", ["of1", "of2"])
        registry.add("of1")
        assert queues.peek("u1") == ["of1", "of2"]
        assert queues.get("u1") == ["of2"]
        assert queues.peek("u1") == ["of2"]

    def test_get_unknown_user_is_empty(self, queues):
        assert queues.get("nobody") == []
        assert queues.expanded("nobody") == []
        assert "nobody" not in queues

    def test_purge_hits_every_queue(self, queues):
        queues.set("u1", ["of1", "c1"])
        queues.set("u2", ["c1"])
        queues.set("u3", ["ss1"])
        assert queues.purge("c1") == 2
        assert queues.peek("u1") == ["of1"]
        assert queues.peek("u2") == []

    def test_expanded_returns_summaries(self, queues):
        queues.set("u1", ["sp1"])
        [summary] = queues.expanded("u1")
        assert summary.name == "Starter One"
        assert summary.position == "SP"
