"""curses front end: polls the keyboard and paints frames."""

from __future__ import annotations

import curses
from typing import Iterable

from loguru import logger

from tick_invaders.config import GameConfig
from tick_invaders.engine import Engine
from tick_invaders.input import KEY_FIRE, KEY_LEFT, KEY_RIGHT, KeyState
from tick_invaders.session import build_game

KEYMAP: dict[int, str] = {
    curses.KEY_LEFT: KEY_LEFT,
    ord("a"): KEY_LEFT,
    curses.KEY_RIGHT: KEY_RIGHT,
    ord("d"): KEY_RIGHT,
    ord(" "): KEY_FIRE,
}
QUIT_KEYS = frozenset({ord("q"), ord("Q"), 27})


def translate_keys(codes: Iterable[int]) -> tuple[set[str], bool]:
    """Map raw curses key codes to logical key names. Returns (keys, quit)."""
    keys: set[str] = set()
    quit_requested = False
    for code in codes:
        if code in QUIT_KEYS:
            quit_requested = True
        elif code in KEYMAP:
            keys.add(KEYMAP[code])
    return keys, quit_requested


def _drain(screen: "curses.window") -> list[int]:
    codes: list[int] = []
    while True:
        code = screen.getch()
        if code == -1:
            return codes
        codes.append(code)


def _paint(screen: "curses.window", frame: str) -> None:
    max_y, max_x = screen.getmaxyx()
    screen.erase()
    for y, line in enumerate(frame.splitlines()[:max_y]):
        # The bottom-right cell cannot be written without moving the cursor off screen.
        limit = max_x - 1 if y == max_y - 1 else max_x
        screen.addstr(y, 0, line[:limit])
    screen.refresh()


def play(screen: "curses.window", config: GameConfig) -> int:
    """Run one session on an initialised curses screen. Returns the final score."""
    curses.curs_set(0)
    screen.nodelay(True)
    screen.keypad(True)

    keys = KeyState()
    world = build_game(config, keys)
    engine = Engine(world, tps=config.tps)

    def on_frame(frame: str) -> None:
        _paint(screen, frame)
        pressed, quit_requested = translate_keys(_drain(screen))
        keys.set_pressed(pressed)
        if quit_requested:
            logger.info("Quit requested")
            engine.request_stop()

    engine.run_forever(on_frame)
    return world.score


def run(config: GameConfig) -> int:
    return curses.wrapper(play, config)
