"""Game tuning constants and the session configuration."""

from __future__ import annotations

from dataclasses import dataclass

from tick_invaders.collision import CollisionMode

# --- Configuration ---
HEIGHT, WIDTH = 40, 80
TPS = 24
STARTING_LIVES = 3

# Player
PLAYER_STEP = 2
PLAYER_BOTTOM_OFFSET = 7

# Enemies
ENEMY_COUNT = 10
ENEMY_SPACING = 7
ENEMY_MOVE_INTERVAL = 10
ENEMY_FIRE_ODDS = 20

# Projectiles are culled once this many rows past the buffer edge.
OFFSCREEN_MARGIN = 1

HUD_ROWS = 4
HUD_BORDER = "#"


@dataclass(frozen=True)
class GameConfig:
    height: int = HEIGHT
    width: int = WIDTH
    tps: int = TPS
    starting_lives: int = STARTING_LIVES
    enemy_count: int = ENEMY_COUNT
    enemy_spacing: int = ENEMY_SPACING
    seed: int | None = None
    collision_mode: CollisionMode = CollisionMode.LEGACY
    offscreen_margin: int | None = OFFSCREEN_MARGIN

    def __post_init__(self) -> None:
        if self.height <= HUD_ROWS + PLAYER_BOTTOM_OFFSET:
            raise ValueError(
                f"height must exceed {HUD_ROWS + PLAYER_BOTTOM_OFFSET}, got {self.height}"
            )
        if self.width <= 0:
            raise ValueError(f"width must be positive, got {self.width}")
        if self.tps <= 0:
            raise ValueError("tps must be positive")
        if self.starting_lives < 0:
            raise ValueError("starting_lives must not be negative")
        if self.enemy_count < 0:
            raise ValueError("enemy_count must not be negative")
        if self.enemy_spacing <= 0:
            raise ValueError("enemy_spacing must be positive")
        if self.offscreen_margin is not None and self.offscreen_margin < 0:
            raise ValueError("offscreen_margin must not be negative")
