"""Terminal invaders.

Controls:
  Left / a    Move left
  Right / d   Move right
  Space       Fire
  q / Escape  Quit
"""
from __future__ import annotations

import argparse
import sys

from loguru import logger

from tick_invaders.collision import CollisionMode
from tick_invaders.config import ENEMY_COUNT, STARTING_LIVES, TPS, GameConfig
from tick_invaders.terminal import run


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="tick-invaders - terminal arcade shooter")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--tps", type=int, default=TPS, help=f"Frames per second (default: {TPS})")
    p.add_argument("--lives", type=int, default=STARTING_LIVES,
                   help=f"Spare lives (default: {STARTING_LIVES})")
    p.add_argument("--enemies", type=int, default=ENEMY_COUNT,
                   help=f"Enemies in the starting row (default: {ENEMY_COUNT})")
    p.add_argument("--collision", choices=[m.value for m in CollisionMode],
                   default=CollisionMode.LEGACY.value, help="Hit test (default: legacy)")
    p.add_argument("--log-file", type=str, default=None, metavar="FILE",
                   help="Write debug log to FILE")
    return p.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        tps=args.tps,
        starting_lives=args.lives,
        enemy_count=args.enemies,
        seed=args.seed,
        collision_mode=CollisionMode(args.collision),
    )


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    # stderr output would scribble over the curses screen.
    logger.remove()
    if args.log_file:
        logger.add(args.log_file, level="DEBUG")

    try:
        config = config_from_args(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    score = run(config)
    print(f"Final score: {score}")


if __name__ == "__main__":
    main()
