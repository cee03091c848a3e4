"""
game_state.py: Session mode transitions and best-score bookkeeping.

Modes:
    START: Waiting for the first impulse, bird bobs in place
    PLAYING: Physics, spawning and scoring are live
    GAME_OVER: Frozen until the next impulse resets to START
"""

import logging
from typing import Set, Tuple

from .data_models import GameState, Mode
from .score_store import ScoreStore, ScoreStoreError

logger = logging.getLogger(__name__)


class GameStateMachine:
    """
    Owns the mode of a GameState. Input reaches it only through
    on_impulse_input; the simulation step only through end_game.
    """

    VALID_TRANSITIONS: Set[Tuple[Mode, Mode]] = {
        (Mode.START, Mode.PLAYING),
        (Mode.PLAYING, Mode.GAME_OVER),
        (Mode.GAME_OVER, Mode.START),
    }

    def __init__(self, state: GameState, jump_strength: float, store: ScoreStore):
        self.state = state
        self.jump_strength = jump_strength
        self.store = store

    @property
    def mode(self) -> Mode:
        return self.state.mode

    def can_transition(self, to_mode: Mode) -> bool:
        return (self.state.mode, to_mode) in self.VALID_TRANSITIONS

    def _transition(self, to_mode: Mode) -> bool:
        if not self.can_transition(to_mode):
            logger.warning(f"Invalid transition: {self.state.mode.name} -> {to_mode.name}")
            return False
        old_mode = self.state.mode
        self.state.mode = to_mode
        logger.info(f"Mode transition: {old_mode.name} -> {to_mode.name}")
        return True

    def on_impulse_input(self) -> Mode:
        """
        The single input entry point. Starts, flaps or resets depending on
        the current mode and returns the mode in effect afterwards.
        """
        mode = self.state.mode
        if mode is Mode.START:
            self._transition(Mode.PLAYING)
            self.state.bird.velocity = self.jump_strength
        elif mode is Mode.PLAYING:
            self.state.bird.velocity = self.jump_strength
        else:
            self.reset()
        return self.state.mode

    def end_game(self) -> bool:
        """
        PLAYING -> GAME_OVER. Safe to call more than once per frame: only
        the first call while playing has any effect.
        """
        if self.state.mode is not Mode.PLAYING:
            return False
        self._transition(Mode.GAME_OVER)

        previous_best = self.state.best_score
        self.state.best_score = max(previous_best, self.state.score)
        if self.state.best_score > previous_best:
            logger.info(f"New best score: {self.state.best_score}")
            try:
                self.store.write_best(self.state.best_score)
            except ScoreStoreError as e:
                logger.warning(f"Best score not saved: {e}")
        return True

    def reset(self) -> bool:
        """GAME_OVER -> START with the session cleared."""
        if not self._transition(Mode.START):
            return False
        self.state.reset()
        return True
