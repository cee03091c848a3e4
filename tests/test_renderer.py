import math

import pygame
import pytest

from flappy.constants import COLOR_GROUND, COLOR_PIPE, COLOR_SKY, WORLD_HEIGHT, WORLD_WIDTH
from flappy.data_models import Mode, PipeView, RenderState
from flappy.renderer import Renderer, bird_tilt


def make_frame(mode=Mode.PLAYING, pipes=(), velocity=0.0):
    return RenderState(mode=mode, bird_y=300.0, bird_velocity=velocity,
                       pipes=tuple(pipes), score=3, best_score=7)


@pytest.fixture
def screen():
    return pygame.Surface((WORLD_WIDTH, WORLD_HEIGHT))


@pytest.fixture
def renderer():
    yield Renderer()
    pygame.font.quit()


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def test_bird_tilt():
    assert bird_tilt(Mode.START, 40.0) == 0.0
    assert bird_tilt(Mode.PLAYING, 2.0) == pytest.approx(0.2)
    assert bird_tilt(Mode.PLAYING, 40.0) == math.pi / 4
    assert bird_tilt(Mode.GAME_OVER, -40.0) == -math.pi / 4


def test_draws_sky_and_ground(screen, renderer):
    renderer.draw(screen, make_frame())
    assert rgb(screen, (5, 100)) == COLOR_SKY
    assert rgb(screen, (5, WORLD_HEIGHT - 5)) == COLOR_GROUND


def test_draws_both_pipes(screen, renderer):
    pipe = PipeView(x=40.0, top_height=200, bottom_y=360, bottom_height=240)
    renderer.draw(screen, make_frame(pipes=[pipe]))
    assert rgb(screen, (65, 100)) == COLOR_PIPE
    assert rgb(screen, (65, 450)) == COLOR_PIPE
    assert rgb(screen, (65, 300)) == COLOR_SKY


def sky_brightness(screen, renderer, mode):
    renderer.draw(screen, make_frame(mode=mode))
    return sum(rgb(screen, (5, 100)))


def test_overlays_dim_outside_play(screen, renderer):
    playing = sky_brightness(screen, renderer, Mode.PLAYING)
    start = sky_brightness(screen, renderer, Mode.START)
    game_over = sky_brightness(screen, renderer, Mode.GAME_OVER)

    assert playing == sum(COLOR_SKY)
    assert start < playing
    assert game_over < start


def bird_pixels(screen, renderer, mode, velocity):
    renderer.draw(screen, make_frame(mode=mode, velocity=velocity))
    return [rgb(screen, (x, y)) for x in range(180, 221) for y in range(280, 321)]


def test_bird_tilts_with_velocity_while_playing(screen, renderer):
    level = bird_pixels(screen, renderer, Mode.PLAYING, 0.0)
    diving = bird_pixels(screen, renderer, Mode.PLAYING, 8.0)
    assert level != diving


def test_bird_stays_level_on_start_screen(screen, renderer):
    resting = bird_pixels(screen, renderer, Mode.START, 0.0)
    falling = bird_pixels(screen, renderer, Mode.START, 8.0)
    assert resting == falling
