"""Logical key names and a held-key input source."""

from __future__ import annotations

from typing import Iterable

KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_FIRE = " "


class KeyState:
    """Keys held during the current frame.

    Queries are a point-in-time snapshot; the driver replaces the
    pressed set once per frame.
    """

    def __init__(self, pressed: Iterable[str] = ()) -> None:
        self._pressed: set[str] = set(pressed)

    def is_key_pressed(self, name: str) -> bool:
        return name in self._pressed

    def press(self, name: str) -> None:
        self._pressed.add(name)

    def release(self, name: str) -> None:
        self._pressed.discard(name)

    def set_pressed(self, names: Iterable[str]) -> None:
        self._pressed = set(names)

    def clear(self) -> None:
        self._pressed.clear()
