"""
Fast-Forward Simulator.

With a human seat designated, auto-plays every other seat until the
human is on the clock or the draft ends. The loop is bounded by an
explicit step budget; running out of budget is reported back to the
caller instead of looping forever.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from draftroom.draft.sequencer import TurnSequencer

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 500


@dataclass
class FastForwardResult:
    """Outcome of one fast-forward run."""

    steps: int = 0
    picks: int = 0
    skips: int = 0
    reached_human: bool = False
    exhausted: bool = False  # Stopped by the step budget


class FastForwardSimulator:
    """
    Drives non-human seats through a turn callback.

    `play_turn(user_id)` must resolve and commit one turn for the user,
    returning True if a player was drafted and False if the turn was
    skipped. Either way the sequencer must have advanced.
    """

    def __init__(
        self,
        sequencer: TurnSequencer,
        play_turn: Callable[[str], bool],
        max_steps: int = DEFAULT_MAX_STEPS,
    ) -> None:
        self.sequencer = sequencer
        self.play_turn = play_turn
        self.max_steps = max_steps

    def _needs_simulation(self) -> bool:
        s = self.sequencer.state
        return (
            s.is_active
            and s.human_user_id is not None
            and s.on_the_clock_user_id is not None
            and s.on_the_clock_user_id != s.human_user_id
        )

    def run_until_human(self, max_steps: Optional[int] = None) -> FastForwardResult:
        """
        Auto-play seats until the human is up, the draft ends, or the
        step budget runs out.

        Args:
            max_steps: Override for the configured step budget

        Returns:
            What happened during the run
        """
        budget = self.max_steps if max_steps is None else max_steps
        result = FastForwardResult()

        while self._needs_simulation() and result.steps < budget:
            if self.play_turn(self.sequencer.state.on_the_clock_user_id):
                result.picks += 1
            else:
                result.skips += 1
            result.steps += 1

        s = self.sequencer.state
        if s.is_active and s.human_user_id is not None and s.on_the_clock_user_id == s.human_user_id:
            result.reached_human = True
            self.sequencer.refresh_deadline()
        elif self._needs_simulation():
            result.exhausted = True
            logger.warning(
                "Fast-forward stopped after %d steps with %s still on the clock",
                result.steps, s.on_the_clock_user_id,
            )

        return result
