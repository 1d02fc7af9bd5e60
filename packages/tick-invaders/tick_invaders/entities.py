"""Entity variants and the per-operation dispatch functions.

Every game object is one of a closed set of dataclasses. The world never
calls methods on them directly; it goes through ``advance``, ``render``,
``classify``, ``locate`` and ``bound`` below, each of which is the single
place that branches on the variant.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from loguru import logger

from tick_invaders.collision import CollisionMode, overlaps
from tick_invaders.config import (
    ENEMY_FIRE_ODDS,
    ENEMY_MOVE_INTERVAL,
    HUD_BORDER,
    HUD_ROWS,
    PLAYER_STEP,
)
from tick_invaders.input import KEY_FIRE, KEY_LEFT, KEY_RIGHT
from tick_invaders.types import BoundingBox, EntityKind, Position, Sprite, sprite_bound

if TYPE_CHECKING:
    from tick_invaders.world import World

PLAYER_SPRITE: Sprite = (
    "  ^  ",
    " |o| ",
    "/ | \\",
)
ENEMY_SPRITE: Sprite = (
    " ^ ^ ",
    "(000)",
    "/! !\\",
)
PLAYER_PROJECTILE_SPRITE: Sprite = ("|",)
ENEMY_PROJECTILE_SPRITE: Sprite = ("$",)

_PROJECTILE_BOX = BoundingBox(1, 1)
_HUD_BOX = BoundingBox(0, 0)


@dataclass
class Player:
    row: int
    col: int
    sprite: Sprite = PLAYER_SPRITE


@dataclass
class Enemy:
    """Marches sideways every ENEMY_MOVE_INTERVAL frames, dropping at the edges."""

    row: int
    col: int
    velocity: int = 1
    counter: int = 0
    sprite: Sprite = ENEMY_SPRITE


@dataclass
class PlayerProjectile:
    row: int
    col: int
    sprite: Sprite = PLAYER_PROJECTILE_SPRITE


@dataclass
class EnemyProjectile:
    row: int
    col: int
    sprite: Sprite = ENEMY_PROJECTILE_SPRITE


@dataclass
class Hud:
    """Score banner pinned to the bottom of the buffer."""

    row: int = 0
    col: int = 0
    sprite: Sprite = ()


Entity = Union[Player, Enemy, PlayerProjectile, EnemyProjectile, Hud]

_KINDS: dict[type, EntityKind] = {
    Player: EntityKind.PLAYER,
    Enemy: EntityKind.ENEMY,
    PlayerProjectile: EntityKind.PROJECTILE,
    EnemyProjectile: EntityKind.PROJECTILE,
    Hud: EntityKind.GUI,
}


def _unknown(entity: object) -> TypeError:
    return TypeError(f"Not a game entity: {type(entity).__name__}")


# -- Dispatch points --


def classify(entity: Entity) -> EntityKind:
    kind = _KINDS.get(type(entity))
    if kind is None:
        raise _unknown(entity)
    return kind


def locate(entity: Entity) -> Position:
    if type(entity) not in _KINDS:
        raise _unknown(entity)
    return Position(entity.row, entity.col)


def bound(entity: Entity) -> BoundingBox:
    if isinstance(entity, (Player, Enemy)):
        return sprite_bound(entity.sprite)
    if isinstance(entity, (PlayerProjectile, EnemyProjectile)):
        return _PROJECTILE_BOX
    if isinstance(entity, Hud):
        return _HUD_BOX
    raise _unknown(entity)


def render(entity: Entity, world: "World") -> tuple[Position, Sprite]:
    if isinstance(entity, Hud):
        entity.sprite = hud_sprite(world.score, world.lives_left, world.width)
    elif type(entity) not in _KINDS:
        raise _unknown(entity)
    return Position(entity.row, entity.col), entity.sprite


def advance(entity: Entity, world: "World", delta: float) -> None:
    if isinstance(entity, Player):
        _advance_player(entity, world)
    elif isinstance(entity, PlayerProjectile):
        _advance_player_projectile(entity, world)
    elif isinstance(entity, Enemy):
        _advance_enemy(entity, world)
    elif isinstance(entity, EnemyProjectile):
        _advance_enemy_projectile(entity, world)
    elif isinstance(entity, Hud):
        entity.row = world.height - HUD_ROWS
    else:
        raise _unknown(entity)


def entities_overlap(
    a: Entity, b: Entity, mode: CollisionMode = CollisionMode.LEGACY
) -> bool:
    return overlaps(locate(a), bound(a), locate(b), bound(b), mode)


def hud_sprite(score: int, lives_left: int, width: int) -> Sprite:
    border = HUD_BORDER * width
    return (
        border,
        f"{HUD_BORDER} Score: {score}",
        f"{HUD_BORDER} Lives Remaining: {lives_left}",
        border,
    )


# -- Variant behaviour --


def _advance_player(player: Player, world: "World") -> None:
    if world.is_key_pressed(KEY_RIGHT):
        player.col += PLAYER_STEP
    if world.is_key_pressed(KEY_LEFT):
        player.col -= PLAYER_STEP
    if world.is_key_pressed(KEY_FIRE):
        world.add(PlayerProjectile(player.row - 1, player.col + 2))


def _advance_enemy(enemy: Enemy, world: "World") -> None:
    enemy.counter += 1
    if enemy.counter < ENEMY_MOVE_INTERVAL:
        return

    height, width = bound(enemy)
    if world.random.randrange(ENEMY_FIRE_ODDS) == 1:
        world.add(EnemyProjectile(enemy.row + height + 1, enemy.col + width // 2))

    enemy.col += enemy.velocity
    enemy.counter = 0

    if enemy.col >= world.width - width:
        enemy.velocity = -1
        enemy.row += height + 1
    if enemy.col <= 0:
        enemy.velocity = 1
        enemy.row += height + 1


def _advance_player_projectile(shot: PlayerProjectile, world: "World") -> None:
    shot.row -= 1
    for eid, other in world.entities():
        if classify(other) is EntityKind.ENEMY and entities_overlap(
            shot, other, world.collision_mode
        ):
            world.remove(eid)
            world.add_to_counter("score", 1)
            logger.debug(f"Enemy {eid} hit at {locate(other)}, score {world.score}")
            break
    _cull_offscreen(shot, world)


def _advance_enemy_projectile(shot: EnemyProjectile, world: "World") -> None:
    shot.row += 1
    for eid, other in world.entities():
        if classify(other) is EntityKind.PLAYER and entities_overlap(
            shot, other, world.collision_mode
        ):
            world.remove(eid)
            lives = world.lives_left
            if lives > 0:
                world.set_counter("lives_left", lives - 1)
                world.add(other)
                logger.debug(f"Player hit, respawning with {lives - 1} lives left")
            else:
                logger.info(f"Player destroyed with no lives left, score {world.score}")
            break
    _cull_offscreen(shot, world)


def _cull_offscreen(shot: PlayerProjectile | EnemyProjectile, world: "World") -> None:
    margin = world.offscreen_margin
    if margin is None:
        return
    if shot.row < -margin or shot.row >= world.height + margin:
        eid = world.id_of(shot)
        if eid is not None:
            world.remove(eid)
            logger.debug(f"Culled projectile {eid} at row {shot.row}")
