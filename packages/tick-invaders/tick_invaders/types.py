"""Shared value types, protocols and errors for the invaders core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Protocol

EntityId = int

# Rows of characters; ragged rows are left unpadded.
Sprite = tuple[str, ...]


class Position(NamedTuple):
    row: int
    col: int


class BoundingBox(NamedTuple):
    height: int
    width: int


class EntityKind(Enum):
    GUI = "gui"
    PLAYER = "player"
    ENEMY = "enemy"
    PROJECTILE = "projectile"


@dataclass
class Counter:
    """A named global value. Only ``integer`` counters are used by the game."""

    kind: str
    value: int | str = 0


class InputSource(Protocol):
    def is_key_pressed(self, name: str) -> bool: ...


class DeadEntityError(KeyError):
    """Raised when operating on an entity that is not in the registry."""

    def __init__(self, entity_id: int, message: str) -> None:
        self.entity_id = entity_id
        super().__init__(message)


def sprite_bound(sprite: Sprite) -> BoundingBox:
    """Height is the row count, width is the first row's length."""
    if not sprite:
        return BoundingBox(0, 0)
    return BoundingBox(len(sprite), len(sprite[0]))
