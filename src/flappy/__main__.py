"""
Command line entry point.

    python -m flappy
    python -m flappy --seed 42 --no-save
    python -m flappy --gravity 0.3 --gap 140
"""

import argparse
import logging
import random
import sys

from .constants import (
    DB_FILE, FPS, GRAVITY, JUMP_IMPULSE, PIPE_GAP, PIPE_SPAWN_INTERVAL_FRAMES,
    PIPE_SPEED, ConfigError, GameConfig
)
from .flappy_client import FlappyClient
from .physics_engine import GameEngine
from .score_store import MemoryScoreStore, SqliteScoreStore

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="flappy")
    p.add_argument("--seed", type=int, default=None,
                   help="Pipe height seed. Omit for a random run.")
    p.add_argument("--db", default=DB_FILE, help="SQLite file holding the best score.")
    p.add_argument("--no-save", action="store_true", help="Keep the best score in memory only.")
    p.add_argument("--fps", type=int, default=FPS, help="Frame rate cap.")
    p.add_argument("--debug", action="store_true", help="Verbose logging.")

    tuning = p.add_argument_group("tuning", "Physics overrides (per frame)")
    tuning.add_argument("--gravity", type=float, default=GRAVITY)
    tuning.add_argument("--jump", type=float, default=JUMP_IMPULSE,
                        help="Flap velocity, negative is up.")
    tuning.add_argument("--pipe-speed", type=float, default=PIPE_SPEED)
    tuning.add_argument("--spawn-rate", type=int, default=PIPE_SPAWN_INTERVAL_FRAMES,
                        help="Frames between pipe spawns.")
    tuning.add_argument("--gap", type=int, default=PIPE_GAP, help="Pipe gap height.")
    return p.parse_args(argv)


def config_from_args(args) -> GameConfig:
    return GameConfig(
        gravity=args.gravity,
        jump_strength=args.jump,
        pipe_speed=args.pipe_speed,
        pipe_spawn_rate=args.spawn_rate,
        pipe_gap=args.gap,
    )


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.debug)

    store = MemoryScoreStore() if args.no_save else SqliteScoreStore(args.db)
    try:
        engine = GameEngine(config_from_args(args), store=store, rng=random.Random(args.seed))
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    client = FlappyClient(engine, fps=args.fps)
    try:
        client.run()
    except KeyboardInterrupt:
        client.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
