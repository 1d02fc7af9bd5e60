"""FrameBuffer - fixed-size character grid that sprites are composited onto."""

from __future__ import annotations

from tick_invaders.types import Position, Sprite


class FrameBuffer:
    def __init__(self, height: int, width: int) -> None:
        if height <= 0 or width <= 0:
            raise ValueError(
                f"frame buffer size must be positive, got {height}x{width}"
            )
        self._height = height
        self._width = width
        self._cells: list[list[str]] = []
        self.clear()

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    def clear(self) -> None:
        self._cells = [[" "] * self._width for _ in range(self._height)]

    def composite(self, origin: Position, sprite: Sprite) -> None:
        """Write sprite cells at origin, dropping any that fall off the grid."""
        top, left = origin
        for r, line in enumerate(sprite):
            y = top + r
            if y < 0 or y >= self._height:
                continue
            row = self._cells[y]
            for c, char in enumerate(line):
                x = left + c
                if 0 <= x < self._width:
                    row[x] = char

    def rows(self) -> list[str]:
        return ["".join(row) for row in self._cells]

    def render(self) -> str:
        return "".join(line + "\n" for line in self.rows())
