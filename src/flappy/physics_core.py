"""
physics_core.py: The shared, deterministic kinematic functions and collision logic.
"""

import math
import random
from typing import Tuple

from .constants import (
    BIRD_X, BOB_AMPLITUDE, BOB_PHASE_MS, DEFAULT_CONFIG, GROUND_Y,
    MIN_PIPE_HEIGHT, RESPAWN_Y, GameConfig
)
from .data_models import Pipe


class PhysicsCore:
    """
    Frame-based physics: every quantity is expressed per frame, so one call
    to apply_gravity_and_movement advances the bird by exactly one tick.
    """

    def __init__(self, config: GameConfig = DEFAULT_CONFIG):
        self.config = config.validate()

    # -- Bird box (circle approximated by a square of side 2 * radius) --

    @property
    def bird_left(self) -> float:
        return BIRD_X - self.config.bird_radius

    @property
    def bird_right(self) -> float:
        return BIRD_X + self.config.bird_radius

    def apply_gravity_and_movement(self, y: float, velocity: float) -> Tuple[float, float]:
        """Calculates new position and velocity after one frame."""
        velocity += self.config.gravity
        y += velocity
        return y, velocity

    def flap(self) -> float:
        """Returns the velocity after a flap. Overwrites, never adds."""
        return self.config.jump_strength

    @staticmethod
    def bob_position(now: float) -> float:
        """Cosmetic idle height on the start screen. `now` is in seconds."""
        return RESPAWN_Y + math.sin(now * 1000.0 / BOB_PHASE_MS) * BOB_AMPLITUDE

    def random_pipe_height(self, rng: random.Random) -> int:
        """Uniform inclusive draw of a top pipe height."""
        return rng.randint(MIN_PIPE_HEIGHT, self.config.max_pipe_height)

    def check_pipe_collision(self, y: float, pipe: Pipe) -> bool:
        """
        Box overlap against the top and bottom pipe of one pair.

        This is a bounding-box approximation of the circular bird, not an
        exact circle/rectangle test. Touching edges do not count.
        """
        radius = self.config.bird_radius
        if not (self.bird_right > pipe.x and self.bird_left < pipe.right):
            return False

        hit_top = y - radius < pipe.top_height
        hit_bottom = y + radius > pipe.bottom_y(self.config.pipe_gap)
        return hit_top or hit_bottom

    def check_bounds(self, y: float) -> bool:
        """Checks for ground or ceiling contact. Touching counts here."""
        radius = self.config.bird_radius
        return y + radius >= GROUND_Y or y - radius <= 0
