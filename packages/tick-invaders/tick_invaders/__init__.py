"""tick-invaders - simulation core of a terminal arcade shooter."""

from tick_invaders.collision import CollisionMode, overlaps, strictly_between
from tick_invaders.config import GameConfig
from tick_invaders.engine import Engine
from tick_invaders.entities import (
    Enemy,
    EnemyProjectile,
    Entity,
    Hud,
    Player,
    PlayerProjectile,
    advance,
    bound,
    classify,
    entities_overlap,
    locate,
    render,
)
from tick_invaders.framebuffer import FrameBuffer
from tick_invaders.input import KEY_FIRE, KEY_LEFT, KEY_RIGHT, KeyState
from tick_invaders.session import build_game
from tick_invaders.types import (
    BoundingBox,
    Counter,
    DeadEntityError,
    EntityId,
    EntityKind,
    InputSource,
    Position,
    Sprite,
)
from tick_invaders.world import World

__all__ = [
    "World",
    "Engine",
    "FrameBuffer",
    "GameConfig",
    "build_game",
    "CollisionMode",
    "overlaps",
    "strictly_between",
    "entities_overlap",
    "Entity",
    "Player",
    "Enemy",
    "PlayerProjectile",
    "EnemyProjectile",
    "Hud",
    "advance",
    "render",
    "classify",
    "locate",
    "bound",
    "KeyState",
    "KEY_LEFT",
    "KEY_RIGHT",
    "KEY_FIRE",
    "Position",
    "BoundingBox",
    "Sprite",
    "Counter",
    "EntityId",
    "EntityKind",
    "InputSource",
    "DeadEntityError",
]
