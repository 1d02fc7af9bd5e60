"""Build the starting state of a game session."""

from __future__ import annotations

from loguru import logger

from tick_invaders.config import PLAYER_BOTTOM_OFFSET, GameConfig
from tick_invaders.entities import Enemy, Hud, Player
from tick_invaders.types import InputSource
from tick_invaders.world import World


def build_game(
    config: GameConfig | None = None, input_source: InputSource | None = None
) -> World:
    """Player near the bottom centre, the HUD, then a row of enemies along the top."""
    if config is None:
        config = GameConfig()

    world = World(
        config.height,
        config.width,
        input_source,
        lives=config.starting_lives,
        seed=config.seed,
        collision_mode=config.collision_mode,
        offscreen_margin=config.offscreen_margin,
    )
    world.add(Player(config.height - PLAYER_BOTTOM_OFFSET, config.width // 2))
    world.add(Hud())
    for i in range(config.enemy_count):
        world.add(Enemy(0, i * config.enemy_spacing))

    logger.info(
        f"Built {config.height}x{config.width} game: {config.enemy_count} enemies, "
        f"{config.starting_lives} lives, seed {world.seed}"
    )
    return world
