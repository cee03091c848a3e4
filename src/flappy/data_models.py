"""
data_models.py: Data structures for the game state.
"""

from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Deque, Tuple

from .constants import PIPE_WIDTH, RESPAWN_Y, WORLD_HEIGHT


class Mode(Enum):
    """Session modes."""
    START = auto()
    PLAYING = auto()
    GAME_OVER = auto()


@dataclass
class Bird:
    """The player avatar. X is fixed at BIRD_X, only the vertical axis moves."""
    y: float = RESPAWN_Y
    velocity: float = 0.0


@dataclass
class Pipe:
    """A top/bottom pipe pair. `top_height` is the bottom edge of the top pipe."""
    x: float
    top_height: int
    scored: bool = False

    @property
    def right(self) -> float:
        return self.x + PIPE_WIDTH

    def bottom_y(self, gap: int) -> int:
        """Where the bottom pipe starts."""
        return self.top_height + gap

    def bottom_height(self, gap: int, world_height: int = WORLD_HEIGHT) -> int:
        return world_height - self.bottom_y(gap)


@dataclass
class GameState:
    """The single mutable simulation record, owned by the engine."""
    mode: Mode = Mode.START
    bird: Bird = field(default_factory=Bird)
    pipes: Deque[Pipe] = field(default_factory=deque)
    score: int = 0
    frame_count: int = 0
    best_score: int = 0

    def reset(self):
        """Back to session defaults. The best score survives."""
        self.mode = Mode.START
        self.bird = Bird()
        self.pipes.clear()
        self.score = 0
        self.frame_count = 0


@dataclass(frozen=True)
class PipeView:
    """Read-only pipe geometry handed to the renderer."""
    x: float
    top_height: int
    bottom_y: int
    bottom_height: int


@dataclass(frozen=True)
class RenderState:
    """Read-only snapshot of one frame, taken after the step completes."""
    mode: Mode
    bird_y: float
    bird_velocity: float
    pipes: Tuple[PipeView, ...]
    score: int
    best_score: int
