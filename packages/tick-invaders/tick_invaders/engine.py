"""Engine - frame loop, pacing, and lifecycle hooks."""

from __future__ import annotations

import time
from typing import Callable

from loguru import logger

from tick_invaders.config import TPS
from tick_invaders.world import World

# Entities move in whole cells per frame, so each tick advances one frame.
FRAME_DELTA = 1.0

Hook = Callable[[World], None]
FrameSink = Callable[[str], None]


class Engine:
    """Runs tick then draw once per frame on a single thread.

    ``tps`` only sets the wall-clock cadence of ``run_forever``; the world
    always advances by ``FRAME_DELTA`` per frame.
    """

    def __init__(
        self, world: World, tps: int = TPS, stop_on_game_over: bool = False
    ) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._frame_time = 1.0 / tps
        self._frames = 0
        self._world = world
        self._stop_on_game_over = stop_on_game_over
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._stop_requested: bool = False

    @property
    def world(self) -> World:
        return self._world

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def frame_time(self) -> float:
        return self._frame_time

    @property
    def frames(self) -> int:
        return self._frames

    @property
    def stop_requested(self) -> bool:
        return self._stop_requested

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def request_stop(self) -> None:
        self._stop_requested = True

    def _frame(self) -> str:
        self._frames += 1
        self._world.tick(FRAME_DELTA)
        frame = self._world.draw()
        if self._stop_on_game_over and self._world.game_over:
            logger.info(f"Game over at frame {self._frames}, score {self._world.score}")
            self._stop_requested = True
        return frame

    def step(self) -> str:
        self._stop_requested = False
        return self._frame()

    def run(self, n: int, on_frame: FrameSink | None = None) -> None:
        self._stop_requested = False
        self._start()
        for _ in range(n):
            frame = self._frame()
            if on_frame is not None:
                on_frame(frame)
            if self._stop_requested:
                break
        self._stop()

    def run_forever(self, on_frame: FrameSink) -> None:
        self._stop_requested = False
        self._start()

        while not self._stop_requested:
            start = time.monotonic()
            on_frame(self._frame())
            if self._stop_requested:
                break
            sleep_time = self._frame_time - (time.monotonic() - start)
            if sleep_time > 0:
                time.sleep(sleep_time)

        self._stop()

    def _start(self) -> None:
        logger.info(f"Engine starting at {self._tps} tps")
        for hook in self._start_hooks:
            hook(self._world)

    def _stop(self) -> None:
        for hook in self._stop_hooks:
            hook(self._world)
        logger.info(f"Engine stopped after {self._frames} frames")
