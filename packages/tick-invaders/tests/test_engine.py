"""Tests for the frame loop."""

from unittest.mock import patch

import pytest

from tick_invaders.engine import FRAME_DELTA, Engine
from tick_invaders.entities import EnemyProjectile, Hud, Player
from tick_invaders.world import World


def _engine(**kwargs):
    return Engine(World(20, 30, seed=0), tps=kwargs.pop("tps", 20), **kwargs)


# --- Cadence ---

def test_engine_cadence():
    engine = _engine()
    assert engine.tps == 20
    assert engine.frame_time == pytest.approx(0.05)
    assert engine.frames == 0


@pytest.mark.parametrize("tps", [0, -5])
def test_engine_rejects_non_positive_tps(tps):
    with pytest.raises(ValueError, match="tps must be positive"):
        _engine(tps=tps)


def test_world_advances_one_frame_per_step():
    engine = _engine()
    deltas = []
    tick = engine.world.tick

    def recording_tick(delta):
        deltas.append(delta)
        tick(delta)

    engine.world.tick = recording_tick
    engine.step()
    engine.step()
    assert deltas == [FRAME_DELTA, FRAME_DELTA]
    assert FRAME_DELTA == 1.0


# --- step() ---

def test_step_ticks_then_draws():
    engine = _engine()
    hud = Hud()
    engine.world.add(hud)
    frame = engine.step()
    # The HUD only reaches the bottom when ticked, so a drawn border proves ordering.
    assert hud.row == 16
    assert frame.splitlines()[16] == "#" * 30
    assert engine.frames == 1


def test_step_returns_rendered_frame():
    engine = _engine()
    assert engine.step() == engine.world.buffer.render()


def test_step_does_not_call_hooks():
    engine = _engine()
    calls = []
    engine.on_start(lambda w: calls.append("start"))
    engine.on_stop(lambda w: calls.append("stop"))
    engine.step()
    assert calls == []


# --- run() ---

def test_run_n_frames():
    engine = _engine()
    frames = []
    engine.run(5, frames.append)
    assert len(frames) == 5
    assert engine.frames == 5


def test_run_calls_hooks_in_order():
    engine = _engine()
    calls = []
    engine.on_start(lambda w: calls.append("start"))
    engine.on_stop(lambda w: calls.append("stop"))
    engine.run(2, lambda f: calls.append("frame"))
    assert calls == ["start", "frame", "frame", "stop"]


def test_hooks_receive_world():
    engine = _engine()
    seen = []
    engine.on_start(seen.append)
    engine.on_stop(seen.append)
    engine.run(1)
    assert seen == [engine.world, engine.world]


def test_request_stop_ends_run_early():
    engine = _engine()

    def on_frame(frame):
        if engine.frames == 3:
            engine.request_stop()

    engine.run(10, on_frame)
    assert engine.frames == 3
    assert engine.stop_requested


def test_stop_on_game_over():
    world = World(20, 30, seed=0, lives=0)
    world.add(Player(10, 10))
    world.add(EnemyProjectile(9, 11))
    engine = Engine(world, tps=20, stop_on_game_over=True)
    engine.run(10)
    assert world.game_over
    assert engine.frames == 1


def test_game_over_ignored_by_default():
    engine = _engine()
    engine.run(4)
    assert engine.world.game_over
    assert engine.frames == 4


# --- run_forever() ---

def test_run_forever_stops_on_request():
    engine = _engine()

    def on_frame(frame):
        if engine.frames == 3:
            engine.request_stop()

    with patch("tick_invaders.engine.time.sleep"):
        engine.run_forever(on_frame)
    assert engine.frames == 3


def test_run_forever_sleeps_remaining_frame_time():
    engine = _engine(tps=10)

    def on_frame(frame):
        if engine.frames == 2:
            engine.request_stop()

    with patch("tick_invaders.engine.time.monotonic", side_effect=[0.0, 0.02, 0.1]), \
         patch("tick_invaders.engine.time.sleep") as sleep:
        engine.run_forever(on_frame)
    sleep.assert_called_once()
    assert sleep.call_args[0][0] == pytest.approx(0.08)


def test_run_forever_skips_sleep_when_behind():
    engine = _engine(tps=10)

    def on_frame(frame):
        if engine.frames == 2:
            engine.request_stop()

    with patch("tick_invaders.engine.time.monotonic", side_effect=[0.0, 0.5, 0.5]), \
         patch("tick_invaders.engine.time.sleep") as sleep:
        engine.run_forever(on_frame)
    sleep.assert_not_called()
