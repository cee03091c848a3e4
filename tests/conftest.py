import os

import pytest

from flappy.constants import GameConfig
from flappy.data_models import Mode
from flappy.physics_engine import GameEngine
from flappy.score_store import MemoryScoreStore, ScoreStoreError

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class FixedRandom:
    """Always draws the same pipe height and counts the draws."""

    def __init__(self, value: int = 220):
        self.value = value
        self.calls = 0

    def randint(self, a, b):
        self.calls += 1
        return self.value


class RecordingStore(MemoryScoreStore):
    def __init__(self, best: int = 0):
        super().__init__(best)
        self.writes = []

    def write_best(self, value: int) -> None:
        self.writes.append(value)
        super().write_best(value)


class BrokenStore:
    def read_best(self) -> int:
        raise ScoreStoreError("disk on fire")

    def write_best(self, value: int) -> None:
        raise ScoreStoreError("disk on fire")


@pytest.fixture
def rng():
    return FixedRandom()


@pytest.fixture
def store():
    return RecordingStore()


@pytest.fixture
def engine(rng, store):
    return GameEngine(GameConfig(), store=store, rng=rng, clock=lambda: 0.0)


def start_playing(engine, y=300.0, velocity=0.0):
    """Puts the engine straight into PLAYING with a known bird."""
    engine.state.mode = Mode.PLAYING
    engine.state.bird.y = y
    engine.state.bird.velocity = velocity
