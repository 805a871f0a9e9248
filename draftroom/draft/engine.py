"""
Draft Engine.

Composition root for a running draft. Owns the roster store, draft
registry, queue store, position limits, turn sequencer, auto-pick
resolver and fast-forward simulator, and exposes the operations a
transport layer calls: init, state, pick, remove, tick, settings, resets
and queues.

Every public operation runs under one reentrant lock, so callers on
different threads (request handlers, a background ticker) are serialized
and never observe a half-applied pick. The engine owns no timer; some
external caller has to invoke tick().
"""

import logging
import threading
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Mapping, Optional

from draftroom.config import DraftConfig
from draftroom.core.catalog import PlayerCatalog
from draftroom.core.models.player import Player
from draftroom.core.models.team import Team
from draftroom.core.scoring import round_points, score_stats
from draftroom.draft.autopick import AutoPickResolver
from draftroom.draft.errors import (
    AlreadyDraftedError,
    DuplicatePickError,
    InvalidDraftInputError,
    PlayerNotFoundError,
    PlayerNotOnTeamError,
    RemovalNotAllowedError,
    RosterLimitError,
    TurnViolationError,
)
from draftroom.draft.fast_forward import FastForwardResult, FastForwardSimulator
from draftroom.draft.limits import (
    DEFAULT_POSITION_LIMITS,
    PositionLimitPolicy,
    PositionLimits,
    validate_position_limits,
)
from draftroom.draft.queues import QueueStore
from draftroom.draft.registry import DraftRegistry
from draftroom.draft.rosters import RosterStore, ScoreFn
from draftroom.draft.sequencer import (
    MAX_PICK_SECONDS,
    MAX_ROUNDS,
    MIN_PICK_SECONDS,
    MIN_ROUNDS,
    Clock,
    TurnSequencer,
    TurnState,
    derive_rounds,
)
from draftroom.events.bus import EventBus
from draftroom.events.types import DraftCompletedEvent, DraftEventType, make_turn_event

logger = logging.getLogger(__name__)

UNKNOWN_PLAYER_NAME = "(Traded/Unknown Player)"


@dataclass
class DraftSettings:
    """Switches that change how turns are resolved."""

    auto_pick: bool = True  # Auto-pick on timeout; False skips the turn
    allow_remove_anytime: bool = True  # False restricts removals to your own turn


def _check_int_range(name: str, value: object, low: int, high: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDraftInputError(f"{name} must be an integer")
    if value < low or value > high:
        raise InvalidDraftInputError(f"{name} must be between {low} and {high}")
    return value


class DraftEngine:
    """
    Single-writer owner of all draft state.

    Usage:
        engine = DraftEngine(PlayerCatalog.from_json_file())
        engine.init_league(["u1", "u2", "u3"], rounds=10)
        engine.pick("u1", "p1")
        engine.tick()  # call periodically
    """

    def __init__(
        self,
        catalog: PlayerCatalog,
        config: Optional[DraftConfig] = None,
        clock: Clock = time.time,
        event_bus: Optional[EventBus] = None,
        score: ScoreFn = score_stats,
    ) -> None:
        self.catalog = catalog
        self.config = config or DraftConfig()
        self.event_bus = event_bus or EventBus()
        self.score = score
        self._lock = threading.RLock()

        self.registry = DraftRegistry()
        self.rosters = RosterStore(catalog, score)
        self.queues = QueueStore(catalog, self.registry)
        self.limits = PositionLimits()
        self.policy = PositionLimitPolicy(self.limits, self.rosters)
        self.settings = DraftSettings()

        self.sequencer = TurnSequencer(
            TurnState(
                pick_seconds=self.config.pick_seconds,
                total_rounds=self.config.default_rounds,
            ),
            clock=clock,
        )
        self.resolver = AutoPickResolver(
            catalog, self.registry, self.rosters, self.queues, self.policy, score
        )
        self.fast_forward = FastForwardSimulator(
            self.sequencer, self._auto_play_turn, self.config.fast_forward_max_steps
        )
        self.last_fast_forward: Optional[FastForwardResult] = None

        # Process-start state: a single default seat on the clock
        self.sequencer.start()

    @property
    def state(self) -> TurnState:
        return self.sequencer.state

    # === League setup ===

    def init_league(
        self,
        order: Iterable[str],
        names: Optional[Mapping[str, str]] = None,
        rounds: Optional[int] = None,
        pick_seconds: Optional[int] = None,
        auto_pick: Optional[bool] = None,
        enforce_limits: Optional[bool] = None,
        position_limits: Optional[Mapping[str, int]] = None,
        allow_remove_anytime: Optional[bool] = None,
    ) -> dict:
        """
        Start a new league draft.

        Clears every roster, the registry and all queues, then puts the
        first seat of round 1 on the clock.

        Args:
            order: User ids in first-round pick order (at least two)
            names: Optional display name per user id
            rounds: 1-40; derived from pool size and team count if omitted
            pick_seconds: 5-600 seconds per pick
            auto_pick: Auto-pick on timeout (default on)
            enforce_limits: Enforce position caps (default on)
            position_limits: Caps merged over the defaults
            allow_remove_anytime: Allow removals off-turn (default on)

        Returns:
            Draft snapshot plus sorted team standings
        """
        order = [str(uid) for uid in order]
        if len(order) < 2:
            raise InvalidDraftInputError("A league needs at least 2 teams")
        if any(not uid for uid in order):
            raise InvalidDraftInputError("User ids cannot be empty")
        if len(set(order)) != len(order):
            raise InvalidDraftInputError("Draft order contains duplicate users")
        if rounds is not None:
            _check_int_range("rounds", rounds, MIN_ROUNDS, MAX_ROUNDS)
        if pick_seconds is not None:
            _check_int_range("pick_seconds", pick_seconds, MIN_PICK_SECONDS, MAX_PICK_SECONDS)
        caps = validate_position_limits(position_limits or {})
        names = dict(names or {})

        with self._lock:
            self.rosters.clear()
            self.registry.clear()
            self.queues.clear()

            for uid in order:
                self.rosters.ensure_team(uid, names.get(uid))
                self.queues.ensure(uid)

            s = self.state
            s.total_rounds = rounds if rounds is not None else derive_rounds(len(self.catalog), len(order))
            s.pick_seconds = pick_seconds if pick_seconds is not None else self.config.pick_seconds
            s.human_user_id = None

            self.settings.auto_pick = True if auto_pick is None else auto_pick
            self.settings.allow_remove_anytime = True if allow_remove_anytime is None else allow_remove_anytime
            self.limits.enforce = True if enforce_limits is None else enforce_limits
            self.limits.caps = {**DEFAULT_POSITION_LIMITS, **caps}
            self.last_fast_forward = None

            self.sequencer.start(order)
            logger.info(
                "League initialized: %d teams, %d rounds, %ds picks",
                len(order), s.total_rounds, s.pick_seconds,
            )
            return {"draft": self._snapshot(), "teams": self._standings()}

    def get_state(self) -> dict:
        with self._lock:
            return self._snapshot()

    def set_human(self, user_id: Optional[str]) -> dict:
        """
        Designate (or clear, with None) the seat a real user controls.

        Every other seat is auto-played up to the human's turn.
        """
        with self._lock:
            if not user_id:
                self.state.human_user_id = None
                return self._snapshot()
            if user_id not in self.state.order:
                raise InvalidDraftInputError("User not in draft order")
            self.state.human_user_id = user_id
            if self.state.is_active:
                self._run_fast_forward()
            return self._snapshot()

    # === Turn resolution ===

    def tick(self) -> dict:
        """
        Resolve time-driven turn changes.

        Before the current deadline this changes nothing. After it the
        seat is auto-picked (or skipped when auto-pick is off or nothing
        is eligible).
        """
        with self._lock:
            s = self.state
            if not s.is_active or s.on_the_clock_user_id is None:
                return self._snapshot()

            if s.human_user_id and s.on_the_clock_user_id != s.human_user_id:
                self._run_fast_forward()
                return self._snapshot()

            if self.sequencer.is_expired():
                user_id = s.on_the_clock_user_id
                if self.settings.auto_pick:
                    self._auto_play_turn(user_id)
                else:
                    self._skip_turn(user_id)
                if s.human_user_id:
                    self._run_fast_forward()
            return self._snapshot()

    def pick(self, user_id: str, player_id: str) -> dict:
        """Draft a player for the user on the clock. Returns the team."""
        with self._lock:
            player = self.catalog.get(player_id)
            if player is None:
                self._check_turn(user_id)
                raise PlayerNotFoundError(player_id)
            team = self.commit_pick(user_id, player, enforce_turn=True, event_type=DraftEventType.PICK)
            return team.to_dict()

    def commit_pick(
        self,
        user_id: str,
        player: Player,
        enforce_turn: bool = True,
        event_type: DraftEventType = DraftEventType.PICK,
        fast_forward: bool = True,
    ) -> Team:
        """
        Commit a pre-resolved pick as one unit of work.

        All preconditions are checked before anything is touched:
        turn ownership (when enforced), registry, team ownership, caps.

        Args:
            user_id: Drafting user
            player: Player to draft
            enforce_turn: Require the user to be on the clock
            event_type: PICK or AUTOPICK
            fast_forward: Auto-play non-human seats afterwards

        Returns:
            The drafting team
        """
        with self._lock:
            s = self.state
            if enforce_turn:
                self._check_turn(user_id)
            if self.registry.is_drafted(player.id):
                logger.info("Rejected pick of %s by %s: already drafted", player.id, user_id)
                raise AlreadyDraftedError(player.id)

            existing = self.rosters.get(user_id)
            if existing is not None and existing.owns(player.id):
                raise DuplicatePickError(user_id, player.id)

            violation = self.policy.check(existing or Team(user_id=user_id), player)
            if violation:
                logger.info("Rejected pick of %s by %s: %s", player.id, user_id, violation)
                raise RosterLimitError(
                    violation, player.position.value, self.limits.cap_for(player.position.value)
                )

            team = self.rosters.ensure_team(user_id)
            self.rosters.add_pick(team, player.id)
            self.registry.add(player.id)
            self.queues.purge(player.id)

            event = make_turn_event(
                event_type, user_id, player.summary(),
                round=s.round, pick_index=s.pick_index, timestamp=self._event_time(),
            )
            s.last_event = event
            logger.info(
                "%s: %s took %s (%s) in round %d",
                event.event_type.value, user_id, player.name, player.position.value, s.round,
            )
            self.event_bus.emit(event)

            self._advance()

            if fast_forward and s.human_user_id:
                self._run_fast_forward()
            return team

    def run_until_human(self, max_steps: Optional[int] = None) -> FastForwardResult:
        """Auto-play non-human seats until the human is on the clock."""
        with self._lock:
            return self._run_fast_forward(max_steps)

    # === Roster changes ===

    def remove(self, user_id: str, player_id: str) -> dict:
        """
        Drop a player from a team and free them for drafting.

        Queues are not re-populated.
        """
        with self._lock:
            if not self.settings.allow_remove_anytime and self.state.on_the_clock_user_id != user_id:
                raise RemovalNotAllowedError(user_id)

            team = self.rosters.require(user_id)
            if not self.rosters.remove_pick(team, player_id):
                raise PlayerNotOnTeamError(user_id, player_id)
            self.registry.discard(player_id)
            self.state.last_event = None
            logger.info("%s removed %s", user_id, player_id)
            return {"team": team.to_dict(), "draft": self._snapshot()}

    def reset_draft(self) -> dict:
        """Clear every pick and restart at round 1; teams, order and settings stay."""
        with self._lock:
            self.registry.clear()
            for team in self.rosters:
                self.rosters.clear_picks(team)
            self.last_fast_forward = None
            self.sequencer.start()
            logger.info("Draft reset")
            return {"draft": self._snapshot(), "teams": self._standings()}

    def reset_team(self, user_id: str) -> dict:
        """Clear one team's picks without touching the turn state."""
        with self._lock:
            team = self.rosters.require(user_id)
            for pid in self.rosters.clear_picks(team):
                self.registry.discard(pid)
            self.state.last_event = None
            logger.info("Team %s reset", user_id)
            return {"team": team.to_dict(), "draft": self._snapshot()}

    # === Settings ===

    def update_settings(
        self,
        pick_seconds: Optional[int] = None,
        auto_pick: Optional[bool] = None,
        enforce_limits: Optional[bool] = None,
        position_limits: Optional[Mapping[str, int]] = None,
        allow_remove_anytime: Optional[bool] = None,
    ) -> dict:
        """
        Change draft settings mid-draft.

        A new pick duration restarts the clock of whoever is on it.
        Position limits are merged into the current caps.
        """
        if pick_seconds is not None:
            _check_int_range("pick_seconds", pick_seconds, MIN_PICK_SECONDS, MAX_PICK_SECONDS)
        caps = validate_position_limits(position_limits or {})

        with self._lock:
            if pick_seconds is not None:
                self.state.pick_seconds = pick_seconds
                if self.state.on_the_clock_user_id:
                    self.sequencer.refresh_deadline()
            if auto_pick is not None:
                self.settings.auto_pick = auto_pick
            if enforce_limits is not None:
                self.limits.enforce = enforce_limits
            if caps:
                self.limits.merge(caps)
            if allow_remove_anytime is not None:
                self.settings.allow_remove_anytime = allow_remove_anytime
            return self._snapshot()

    # === Queries ===

    def get_team(self, user_id: str) -> dict:
        """Team detail with per-pick points; unknown picks render as placeholders."""
        with self._lock:
            team = self.rosters.require(user_id)
            items = []
            for pid in team.picks:
                player = self.catalog.get(pid)
                if player is None:
                    items.append({
                        "id": pid,
                        "name": UNKNOWN_PLAYER_NAME,
                        "position": "UT",
                        "team": "—",
                        "stats": {},
                        "points": 0.0,
                        "status": "UNKNOWN",
                    })
                    continue
                items.append({
                    **player.to_dict(),
                    "points": self.score(player.stats),
                    "status": "OK",
                })
            return {
                "user_id": user_id,
                "team_name": team.name,
                "total_points": round_points(sum(it["points"] for it in items)),
                "players": items,
            }

    def list_teams_sorted(self) -> list[dict]:
        with self._lock:
            return self._standings()

    # === Queues ===

    def get_queue(self, user_id: str) -> list[dict]:
        """User's queue as player summaries; drafted ids are pruned on read."""
        with self._lock:
            return [p.to_dict() for p in self.queues.expanded(user_id)]

    def set_queue(self, user_id: str, player_ids: Iterable[str]) -> int:
        """Replace a user's queue. Returns how many ids survived sanitizing."""
        with self._lock:
            stored = self.queues.set(user_id, player_ids)
            self.rosters.ensure_team(user_id)
            return len(stored)

    # === Internals (lock held) ===

    def _event_time(self) -> datetime:
        return datetime.fromtimestamp(self.sequencer.now())

    def _check_turn(self, user_id: str) -> None:
        s = self.state
        if not s.is_active or s.on_the_clock_user_id != user_id:
            logger.info("Rejected pick by %s: not on the clock", user_id)
            raise TurnViolationError(user_id, s.on_the_clock_user_id)

    def _advance(self) -> None:
        was_active = self.state.is_active
        if self.sequencer.advance() is None and was_active:
            logger.info("Draft complete after %d rounds", self.state.total_rounds)
            self.event_bus.emit(DraftCompletedEvent(
                timestamp=self._event_time(),
                round=self.state.total_rounds,
                total_rounds=self.state.total_rounds,
                picks_made=len(self.registry),
            ))

    def _skip_turn(self, user_id: str) -> None:
        s = self.state
        event = make_turn_event(
            DraftEventType.SKIPPED, user_id,
            round=s.round, pick_index=s.pick_index, timestamp=self._event_time(),
        )
        s.last_event = event
        logger.info("%s skipped in round %d", user_id, s.round)
        self.event_bus.emit(event)
        self._advance()

    def _auto_play_turn(self, user_id: str) -> bool:
        """
        Resolve and commit one auto-pick; skip the turn if nothing is eligible.

        Returns:
            True if a player was drafted
        """
        choice = self.resolver.resolve(user_id)
        if choice is None:
            self._skip_turn(user_id)
            return False
        self.commit_pick(
            user_id, choice.player,
            enforce_turn=False,
            event_type=DraftEventType.AUTOPICK,
            fast_forward=False,
        )
        return True

    def _run_fast_forward(self, max_steps: Optional[int] = None) -> FastForwardResult:
        result = self.fast_forward.run_until_human(max_steps)
        self.last_fast_forward = result
        return result

    def _standings(self) -> list[dict]:
        return [
            {"user_id": t.user_id, "name": t.name, "points": t.points}
            for t in self.rosters.standings()
        ]

    def _snapshot(self) -> dict:
        snap = self.state.to_dict()
        snap.update({
            "seconds_remaining": self.sequencer.seconds_remaining(),
            "auto_pick": self.settings.auto_pick,
            "enforce_limits": self.limits.enforce,
            "position_limits": dict(self.limits.caps),
            "allow_remove_anytime": self.settings.allow_remove_anytime,
            "drafted_ids": self.registry.ids(),
            "fast_forward_exhausted": bool(self.last_fast_forward and self.last_fast_forward.exhausted),
        })
        return snap
