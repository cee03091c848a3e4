"""
flappy_client.py

pygame window, frame loop and input wiring around a GameEngine.
"""

import logging
import threading

import pygame

from .constants import FPS, WORLD_HEIGHT, WORLD_WIDTH
from .physics_engine import GameEngine
from .renderer import Renderer

logger = logging.getLogger(__name__)

IMPULSE_KEYS = (pygame.K_SPACE, pygame.K_UP)


def is_impulse_event(event: pygame.event.Event) -> bool:
    """Space, arrow up, left click and touch all mean the same thing."""
    if event.type == pygame.KEYDOWN:
        return event.key in IMPULSE_KEYS
    if event.type == pygame.MOUSEBUTTONDOWN:
        return event.button == 1
    return event.type == pygame.FINGERDOWN


def is_quit_event(event: pygame.event.Event) -> bool:
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE


class FlappyClient:
    def __init__(self, engine: GameEngine, fps: int = FPS):
        self.engine = engine
        self.fps = fps
        self.screen = None
        self.renderer = None
        self.clock = None

        self.running = threading.Event()

    def _open_window(self):
        pygame.init()
        # vsync is only honoured with SCALED/OPENGL; the clock caps the rate regardless
        self.screen = pygame.display.set_mode((WORLD_WIDTH, WORLD_HEIGHT), pygame.SCALED, vsync=1)
        pygame.display.set_caption("Flappy")
        self.renderer = Renderer(self.engine.config)
        self.clock = pygame.time.Clock()

    def handle_events(self, events):
        """Processes events in arrival order, each against the current mode."""
        for event in events:
            if is_quit_event(event):
                self.stop()
            elif is_impulse_event(event):
                self.engine.on_impulse_input()

    def run_frame(self):
        """One scheduled tick: input, step, draw."""
        self.handle_events(pygame.event.get())
        if not self.running.is_set():
            return
        self.engine.step()
        self.renderer.draw(self.screen, self.engine.to_render_state())
        pygame.display.flip()

    def run(self):
        """The main execution loop. Returns once stop() is called or the window closes."""
        self.running.set()
        try:
            self._open_window()
            logger.info(f"Frame loop started at {self.fps} FPS")
            while self.running.is_set():
                self.clock.tick(self.fps)
                self.run_frame()
        finally:
            self.running.clear()
            pygame.quit()
            logger.info("Frame loop stopped")

    def stop(self):
        """Stops scheduling further frames. The frame in progress completes."""
        self.running.clear()
