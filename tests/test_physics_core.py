import math
import random

import pytest

from flappy.constants import GameConfig
from flappy.data_models import Pipe
from flappy.physics_core import PhysicsCore


@pytest.fixture
def core():
    return PhysicsCore(GameConfig())


def test_gravity_then_movement(core):
    assert core.apply_gravity_and_movement(300.0, 0.0) == (300.25, 0.25)
    assert core.apply_gravity_and_movement(300.0, -5.5) == (294.75, -5.25)


def test_flap_is_the_impulse_constant(core):
    assert core.flap() == -5.5


def test_bird_box(core):
    assert core.bird_left == 186
    assert core.bird_right == 214


def test_bob_position():
    assert PhysicsCore.bob_position(0.0) == 300
    quarter = (math.pi / 2) * 300 / 1000
    assert PhysicsCore.bob_position(quarter) == pytest.approx(310)
    assert PhysicsCore.bob_position(3 * quarter) == pytest.approx(290)


def test_random_pipe_height_stays_in_range(core):
    rng = random.Random(1234)
    heights = {core.random_pipe_height(rng) for _ in range(5000)}
    assert min(heights) == 50
    assert max(heights) == 290
    assert all(isinstance(h, int) for h in heights)


class TestPipeCollision:
    def test_inside_gap_is_safe(self, core):
        pipe = Pipe(x=190, top_height=220)
        assert not core.check_pipe_collision(300, pipe)

    def test_top_pipe_hit(self, core):
        pipe = Pipe(x=190, top_height=100)
        assert core.check_pipe_collision(113.9, pipe)

    def test_touching_top_pipe_is_not_a_hit(self, core):
        pipe = Pipe(x=190, top_height=100)
        assert not core.check_pipe_collision(114, pipe)

    def test_bottom_pipe_hit(self, core):
        pipe = Pipe(x=190, top_height=100)
        assert core.check_pipe_collision(246.1, pipe)

    def test_touching_bottom_pipe_is_not_a_hit(self, core):
        pipe = Pipe(x=190, top_height=100)
        assert not core.check_pipe_collision(246, pipe)

    def test_touching_left_edge_is_not_a_hit(self, core):
        pipe = Pipe(x=214, top_height=500)
        assert not core.check_pipe_collision(300, pipe)
        pipe.x = 213.9
        assert core.check_pipe_collision(300, pipe)

    def test_touching_right_edge_is_not_a_hit(self, core):
        pipe = Pipe(x=136, top_height=500)
        assert not core.check_pipe_collision(300, pipe)
        pipe.x = 136.1
        assert core.check_pipe_collision(300, pipe)

    def test_box_corner_counts_as_hit(self, core):
        # The circle would miss this corner; the square approximation does not
        pipe = Pipe(x=213, top_height=288)
        assert core.check_pipe_collision(300, pipe)


def test_bounds(core):
    assert core.check_bounds(566)
    assert not core.check_bounds(565.9)
    assert core.check_bounds(14)
    assert not core.check_bounds(14.1)
    assert not core.check_bounds(300)


def test_pipe_geometry():
    pipe = Pipe(x=100, top_height=120)
    assert pipe.right == 150
    assert pipe.bottom_y(160) == 280
    assert pipe.bottom_height(160) == 320
    assert pipe.bottom_height(160, world_height=500) == 220
