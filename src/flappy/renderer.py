"""
renderer.py: Procedural pygame drawing of a RenderState. Reads state, never mutates it.
"""

import math

import pygame

from .constants import (
    BIRD_X, COLOR_BIRD, COLOR_BIRD_BEAK, COLOR_BIRD_WING, COLOR_GAME_OVER,
    COLOR_GROUND, COLOR_GROUND_BORDER, COLOR_PIPE, COLOR_PIPE_BORDER, COLOR_SKY,
    COLOR_TEXT, COLOR_TEXT_SHADOW, COLOR_TITLE, DEFAULT_CONFIG, GROUND_HEIGHT,
    GROUND_Y, PIPE_WIDTH, WORLD_HEIGHT, WORLD_WIDTH, GameConfig
)
from .data_models import Mode, PipeView, RenderState

PIPE_CAP_HEIGHT = 20
PIPE_CAP_OVERHANG = 2
MAX_TILT = math.pi / 4
TILT_PER_VELOCITY = 0.1
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


def bird_tilt(mode: Mode, velocity: float) -> float:
    """Cosmetic rotation in radians, clockwise positive. Level on the start screen."""
    if mode is Mode.START:
        return 0.0
    return min(MAX_TILT, max(-MAX_TILT, velocity * TILT_PER_VELOCITY))


class Renderer:
    """Draws one frame at world resolution onto the given surface."""

    def __init__(self, config: GameConfig = DEFAULT_CONFIG):
        pygame.font.init()
        self.config = config
        self.score_font = pygame.font.Font(None, 64)
        self.title_font = pygame.font.Font(None, 56)
        self.font = pygame.font.Font(None, 28)
        self.bird_sprite = self._build_bird()

    def _build_bird(self) -> pygame.Surface:
        radius = int(self.config.bird_radius)
        size = radius * 2 + 12
        c = size // 2
        sprite = pygame.Surface((size, size), pygame.SRCALPHA)

        # Body
        pygame.draw.circle(sprite, COLOR_BIRD, (c, c), radius)
        pygame.draw.circle(sprite, BLACK, (c, c), radius, 2)

        # Eye
        pygame.draw.circle(sprite, WHITE, (c + 6, c - 6), 5)
        pygame.draw.circle(sprite, BLACK, (c + 6, c - 6), 5, 1)
        pygame.draw.circle(sprite, BLACK, (c + 8, c - 6), 2)

        # Wing
        wing = pygame.Rect(c - 14, c - 1, 16, 10)
        pygame.draw.ellipse(sprite, COLOR_BIRD_WING, wing)
        pygame.draw.ellipse(sprite, BLACK, wing, 1)

        # Beak
        beak = [(c + 8, c + 2), (c + 16, c + 6), (c + 8, c + 10)]
        pygame.draw.polygon(sprite, COLOR_BIRD_BEAK, beak)
        pygame.draw.polygon(sprite, BLACK, beak, 1)
        return sprite

    def draw(self, screen: pygame.Surface, frame: RenderState):
        screen.fill(COLOR_SKY)
        for pipe in frame.pipes:
            self._draw_pipe(screen, pipe)
        self._draw_ground(screen)
        self._draw_bird(screen, frame)

        self._draw_text(screen, str(frame.score), self.score_font, COLOR_TEXT, 50)
        if frame.mode is Mode.START:
            self._draw_start_overlay(screen)
        elif frame.mode is Mode.GAME_OVER:
            self._draw_game_over_overlay(screen, frame)

    def _draw_pipe(self, screen: pygame.Surface, pipe: PipeView):
        x = int(pipe.x)
        top_body = pygame.Rect(x, 0, PIPE_WIDTH, pipe.top_height)
        top_cap = pygame.Rect(x - PIPE_CAP_OVERHANG, pipe.top_height - PIPE_CAP_HEIGHT,
                              PIPE_WIDTH + 2 * PIPE_CAP_OVERHANG, PIPE_CAP_HEIGHT)
        bottom_body = pygame.Rect(x, pipe.bottom_y, PIPE_WIDTH, pipe.bottom_height)
        bottom_cap = pygame.Rect(x - PIPE_CAP_OVERHANG, pipe.bottom_y,
                                 PIPE_WIDTH + 2 * PIPE_CAP_OVERHANG, PIPE_CAP_HEIGHT)

        for rect in (top_body, top_cap, bottom_body, bottom_cap):
            pygame.draw.rect(screen, COLOR_PIPE, rect)
            pygame.draw.rect(screen, COLOR_PIPE_BORDER, rect, 2)

    def _draw_ground(self, screen: pygame.Surface):
        pygame.draw.rect(screen, COLOR_GROUND, (0, GROUND_Y, WORLD_WIDTH, GROUND_HEIGHT))
        pygame.draw.line(screen, COLOR_GROUND_BORDER, (0, GROUND_Y), (WORLD_WIDTH, GROUND_Y), 4)

    def _draw_bird(self, screen: pygame.Surface, frame: RenderState):
        # pygame rotates counter-clockwise for positive angles
        angle = -math.degrees(bird_tilt(frame.mode, frame.bird_velocity))
        sprite = pygame.transform.rotate(self.bird_sprite, angle)
        screen.blit(sprite, sprite.get_rect(center=(BIRD_X, int(frame.bird_y))))

    def _draw_text(self, screen, text, font, color, center_y):
        shadow = font.render(text, True, COLOR_TEXT_SHADOW)
        surf = font.render(text, True, color)
        rect = surf.get_rect(center=(WORLD_WIDTH // 2, center_y))
        screen.blit(shadow, rect.move(2, 2))
        screen.blit(surf, rect)

    def _dim(self, screen: pygame.Surface, alpha: int):
        shade = pygame.Surface((WORLD_WIDTH, WORLD_HEIGHT), pygame.SRCALPHA)
        shade.fill((0, 0, 0, alpha))
        screen.blit(shade, (0, 0))

    def _draw_start_overlay(self, screen: pygame.Surface):
        self._dim(screen, 77)
        self._draw_text(screen, "FLAPPY", self.title_font, COLOR_TITLE, WORLD_HEIGHT // 2 - 60)
        self._draw_text(screen, "Tap or Space to start", self.font, COLOR_TEXT,
                        WORLD_HEIGHT // 2 + 50)

    def _draw_game_over_overlay(self, screen: pygame.Surface, frame: RenderState):
        self._dim(screen, 128)
        self._draw_text(screen, "GAME OVER", self.title_font, COLOR_GAME_OVER, 120)
        best = max(frame.score, frame.best_score)
        self._draw_text(screen, f"SCORE {frame.score}   BEST {best}", self.font, COLOR_TEXT, 180)
        self._draw_text(screen, "Tap or Space to play again", self.font, COLOR_TEXT,
                        WORLD_HEIGHT - 80)
