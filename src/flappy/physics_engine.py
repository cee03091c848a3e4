"""
physics_engine.py: The per-frame simulation step.
"""

import logging
import random
import time
from typing import Callable, Optional

from .constants import DEFAULT_CONFIG, PIPE_REMOVAL_MARGIN, WORLD_WIDTH, GameConfig
from .data_models import GameState, Mode, Pipe, PipeView, RenderState
from .game_state import GameStateMachine
from .physics_core import PhysicsCore
from .score_store import MemoryScoreStore, ScoreStore, ScoreStoreError

logger = logging.getLogger(__name__)


class GameEngine(PhysicsCore):
    """
    Owns the GameState and advances it one frame per step() call.
    Inherits kinematics and collision from PhysicsCore.
    """

    def __init__(
        self,
        config: GameConfig = DEFAULT_CONFIG,
        store: Optional[ScoreStore] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.time,
    ):
        super().__init__(config)
        self.store = store if store is not None else MemoryScoreStore()
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock

        self.state = GameState(best_score=self._load_best())
        self.machine = GameStateMachine(self.state, self.config.jump_strength, self.store)

    def _load_best(self) -> int:
        try:
            best = self.store.read_best()
        except ScoreStoreError as e:
            logger.warning(f"Best score unavailable, starting from 0: {e}")
            return 0
        logger.info(f"Loaded best score: {best}")
        return best

    def on_impulse_input(self) -> Mode:
        """Keyboard, mouse and touch all land here."""
        return self.machine.on_impulse_input()

    def _spawn_pipe(self):
        """Adds a new pipe pair at the right edge of the world."""
        pipe = Pipe(x=float(WORLD_WIDTH), top_height=self.random_pipe_height(self.rng))
        self.state.pipes.append(pipe)
        logger.debug(f"Spawned pipe at frame {self.state.frame_count}, top_height={pipe.top_height}")

    def step(self, now: Optional[float] = None):
        """
        Advances the simulation by one frame. `now` (seconds) only drives
        the start-screen bob and defaults to the engine clock.
        """
        state = self.state

        if state.mode is Mode.START:
            state.bird.y = self.bob_position(self.clock() if now is None else now)
            return
        if state.mode is not Mode.PLAYING:
            return

        bird = state.bird
        cfg = self.config

        # 1-2. Gravity and movement
        bird.y, bird.velocity = self.apply_gravity_and_movement(bird.y, bird.velocity)

        # 3. Spawn
        if state.frame_count % cfg.pipe_spawn_rate == 0:
            self._spawn_pipe()

        # 4. Move, collide, score
        for pipe in state.pipes:
            pipe.x -= cfg.pipe_speed

            if self.check_pipe_collision(bird.y, pipe):
                self.machine.end_game()
                return

            if not pipe.scored and self.bird_left > pipe.right:
                pipe.scored = True
                state.score += 1

        # 5. Drop the oldest pipe once it is off-screen
        if state.pipes and state.pipes[0].right < -PIPE_REMOVAL_MARGIN:
            state.pipes.popleft()
            logger.debug(f"Removed pipe at frame {state.frame_count}")

        # 6. Ground / ceiling
        if self.check_bounds(bird.y):
            self.machine.end_game()
            return

        state.frame_count += 1

    def to_render_state(self) -> RenderState:
        """Prepares an immutable snapshot of the frame for the renderer."""
        gap = self.config.pipe_gap
        state = self.state
        return RenderState(
            mode=state.mode,
            bird_y=state.bird.y,
            bird_velocity=state.bird.velocity,
            pipes=tuple(
                PipeView(
                    x=pipe.x,
                    top_height=pipe.top_height,
                    bottom_y=pipe.bottom_y(gap),
                    bottom_height=pipe.bottom_height(gap),
                )
                for pipe in state.pipes
            ),
            score=state.score,
            best_score=state.best_score,
        )
