"""
constants.py: Centralized configuration for world, physics and render settings.
"""

from dataclasses import dataclass

# -------- Game World Config --------
WORLD_WIDTH = 400
WORLD_HEIGHT = 600
GROUND_HEIGHT = 20              # Ground band drawn at the bottom of the world
GROUND_Y = WORLD_HEIGHT - GROUND_HEIGHT
BIRD_X = WORLD_WIDTH // 2       # Fixed bird X position (centre)
RESPAWN_Y = WORLD_HEIGHT / 2

# -------- Pipe Config --------
PIPE_WIDTH = 50
MIN_PIPE_HEIGHT = 50            # Minimum top pipe height
GROUND_CLEARANCE = 100          # Minimum room kept above the ground for the bottom pipe
PIPE_REMOVAL_MARGIN = 10        # Right edge must be this far past x=0 before removal

# -------- Start Screen Bob --------
BOB_AMPLITUDE = 10.0
BOB_PHASE_MS = 300.0            # sin(now_ms / BOB_PHASE_MS)

# -------- Physics Config (pixels / frame) --------
GRAVITY = 0.25
JUMP_IMPULSE = -5.5
PIPE_SPEED = 2.5
PIPE_SPAWN_INTERVAL_FRAMES = 140
PIPE_GAP = 160
BIRD_RADIUS = 14

# -------- Frame Loop --------
FPS = 60

# -------- Persistence --------
DB_FILE = "flappy_scores.db"
SCORE_KEY = "flappyHighScore"

# -------- Colors (RGB) --------
COLOR_SKY = (78, 192, 202)
COLOR_GROUND = (222, 216, 149)
COLOR_GROUND_BORDER = (115, 191, 46)
COLOR_BIRD = (244, 206, 66)
COLOR_BIRD_WING = (252, 242, 196)
COLOR_BIRD_BEAK = (232, 97, 1)
COLOR_PIPE = (115, 191, 46)
COLOR_PIPE_BORDER = (85, 140, 34)
COLOR_TEXT = (255, 255, 255)
COLOR_TEXT_SHADOW = (0, 0, 0)
COLOR_TITLE = (244, 206, 66)
COLOR_GAME_OVER = (232, 97, 1)


class ConfigError(ValueError):
    """Raised when tuning constants describe an unplayable world."""


@dataclass(frozen=True)
class GameConfig:
    """Tuning constants shared by the physics step and the renderer."""
    gravity: float = GRAVITY
    jump_strength: float = JUMP_IMPULSE
    pipe_speed: float = PIPE_SPEED
    pipe_spawn_rate: int = PIPE_SPAWN_INTERVAL_FRAMES
    pipe_gap: int = PIPE_GAP
    bird_radius: float = BIRD_RADIUS

    @property
    def max_pipe_height(self) -> int:
        """Tallest top pipe that still leaves the gap and ground clearance."""
        return WORLD_HEIGHT - self.pipe_gap - MIN_PIPE_HEIGHT - GROUND_CLEARANCE

    def validate(self) -> "GameConfig":
        """Checks the constants once at startup. Returns self for chaining."""
        if self.gravity <= 0:
            raise ConfigError(f"gravity must be positive, got {self.gravity}")
        if self.jump_strength >= 0:
            raise ConfigError(
                f"jump_strength must be negative (upward), got {self.jump_strength}")
        if self.pipe_speed <= 0:
            raise ConfigError(f"pipe_speed must be positive, got {self.pipe_speed}")
        if self.pipe_spawn_rate < 1:
            raise ConfigError(
                f"pipe_spawn_rate must be at least 1 frame, got {self.pipe_spawn_rate}")
        if self.pipe_gap <= 0:
            raise ConfigError(f"pipe_gap must be positive, got {self.pipe_gap}")
        if self.bird_radius <= 0:
            raise ConfigError(f"bird_radius must be positive, got {self.bird_radius}")
        if self.max_pipe_height < MIN_PIPE_HEIGHT:
            raise ConfigError(
                f"pipe_gap {self.pipe_gap} leaves no room for pipes: "
                f"height range [{MIN_PIPE_HEIGHT}, {self.max_pipe_height}] is empty")
        return self


DEFAULT_CONFIG = GameConfig()
