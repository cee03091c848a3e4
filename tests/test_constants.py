import pytest

from flappy.constants import MIN_PIPE_HEIGHT, ConfigError, GameConfig
from flappy.physics_engine import GameEngine


def test_defaults_are_valid():
    config = GameConfig()
    assert config.validate() is config
    assert config.gravity == 0.25
    assert config.jump_strength == -5.5
    assert config.pipe_speed == 2.5
    assert config.pipe_spawn_rate == 140
    assert config.pipe_gap == 160
    assert config.bird_radius == 14


def test_max_pipe_height():
    assert GameConfig().max_pipe_height == 290


def test_gap_that_just_fits_is_accepted():
    config = GameConfig(pipe_gap=400)
    assert config.max_pipe_height == MIN_PIPE_HEIGHT
    config.validate()


@pytest.mark.parametrize("overrides", [
    {"pipe_gap": 401},
    {"pipe_gap": 0},
    {"gravity": 0},
    {"jump_strength": 1.0},
    {"pipe_speed": -1},
    {"pipe_spawn_rate": 0},
    {"bird_radius": 0},
])
def test_invalid_config_rejected(overrides):
    with pytest.raises(ConfigError):
        GameConfig(**overrides).validate()


def test_engine_validates_at_startup():
    with pytest.raises(ConfigError, match="no room for pipes"):
        GameEngine(GameConfig(pipe_gap=500))
