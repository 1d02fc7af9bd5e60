"""Pure collision predicates over axis-aligned boxes on the character grid."""

from __future__ import annotations

from enum import Enum

from tick_invaders.types import BoundingBox, Position


class CollisionMode(Enum):
    """Which overlap predicate the world uses for hit detection.

    LEGACY only checks whether A's near or far edge lies strictly inside
    B's span on each axis. It is asymmetric, and touching edges or
    zero-size boxes never hit. AABB is the conventional symmetric test.
    """

    LEGACY = "legacy"
    AABB = "aabb"


def strictly_between(n: int, lo: int, hi: int) -> bool:
    """True if n lies strictly between the bounds, in either order."""
    return (lo < n < hi) or (hi < n < lo)


def _edge_inside(a0: int, a_size: int, b0: int, b_size: int) -> bool:
    b1 = b0 + b_size
    return strictly_between(a0, b0, b1) or strictly_between(a0 + a_size, b0, b1)


def _spans_overlap(a0: int, a_size: int, b0: int, b_size: int) -> bool:
    if a_size <= 0 or b_size <= 0:
        return False
    return a0 < b0 + b_size and b0 < a0 + a_size


def overlaps(
    a_pos: Position,
    a_box: BoundingBox,
    b_pos: Position,
    b_box: BoundingBox,
    mode: CollisionMode = CollisionMode.LEGACY,
) -> bool:
    if mode is CollisionMode.LEGACY:
        axis = _edge_inside
    elif mode is CollisionMode.AABB:
        axis = _spans_overlap
    else:
        raise ValueError(f"Unknown collision mode {mode!r}")
    return axis(a_pos.col, a_box.width, b_pos.col, b_box.width) and axis(
        a_pos.row, a_box.height, b_pos.row, b_box.height
    )
