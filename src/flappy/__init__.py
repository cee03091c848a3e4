"""Flappy: a single-screen arcade game with a fixed-step physics core."""

from .constants import ConfigError, GameConfig
from .data_models import GameState, Mode, Pipe, RenderState
from .physics_engine import GameEngine
from .score_store import MemoryScoreStore, ScoreStoreError, SqliteScoreStore

__all__ = [
    "ConfigError",
    "GameConfig",
    "GameEngine",
    "GameState",
    "MemoryScoreStore",
    "Mode",
    "Pipe",
    "RenderState",
    "ScoreStoreError",
    "SqliteScoreStore",
]
