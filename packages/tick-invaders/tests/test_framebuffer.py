"""Tests for frame buffer clearing, compositing and rendering."""

import pytest

from tick_invaders.framebuffer import FrameBuffer
from tick_invaders.types import Position


# --- Construction ---

def test_new_buffer_is_blank():
    fb = FrameBuffer(3, 4)
    assert fb.rows() == ["    "] * 3


def test_size_properties():
    fb = FrameBuffer(40, 80)
    assert fb.height == 40
    assert fb.width == 80


@pytest.mark.parametrize("height, width", [(0, 10), (10, 0), (-1, 5)])
def test_non_positive_size_raises(height, width):
    with pytest.raises(ValueError, match="must be positive"):
        FrameBuffer(height, width)


# --- render() ---

def test_render_terminates_every_row():
    fb = FrameBuffer(2, 3)
    assert fb.render() == "   \n   \n"


def test_render_size_matches_buffer():
    fb = FrameBuffer(40, 80)
    lines = fb.render().split("\n")
    assert lines[-1] == ""
    assert len(lines[:-1]) == 40
    assert all(len(line) == 80 for line in lines[:-1])


# --- composite() in bounds ---

def test_composite_places_sprite_at_origin():
    fb = FrameBuffer(5, 6)
    fb.composite(Position(1, 2), ("ab", "cd"))
    assert fb.rows() == [
        "      ",
        "  ab  ",
        "  cd  ",
        "      ",
        "      ",
    ]


def test_composite_leaves_other_cells_untouched():
    fb = FrameBuffer(3, 3)
    fb.composite(Position(0, 0), ("xxx", "xxx", "xxx"))
    fb.composite(Position(1, 1), ("o",))
    assert fb.rows() == ["xxx", "xox", "xxx"]


def test_ragged_rows_are_not_padded():
    fb = FrameBuffer(2, 4)
    fb.composite(Position(0, 0), ("####", "####"))
    fb.composite(Position(0, 0), ("ab", "c"))
    assert fb.rows() == ["ab##", "c###"]


def test_later_composite_occludes_earlier():
    fb = FrameBuffer(1, 3)
    fb.composite(Position(0, 0), ("aaa",))
    fb.composite(Position(0, 1), ("b",))
    assert fb.rows() == ["aba"]


def test_spaces_in_sprite_overwrite():
    fb = FrameBuffer(1, 3)
    fb.composite(Position(0, 0), ("xxx",))
    fb.composite(Position(0, 0), (" y ",))
    assert fb.rows() == [" y "]


# --- composite() out of bounds ---

def test_clip_right_edge():
    fb = FrameBuffer(1, 4)
    fb.composite(Position(0, 2), ("abcd",))
    assert fb.rows() == ["  ab"]


def test_clip_left_edge():
    fb = FrameBuffer(1, 4)
    fb.composite(Position(0, -2), ("abcd",))
    assert fb.rows() == ["cd  "]


def test_clip_top_and_bottom():
    fb = FrameBuffer(2, 2)
    fb.composite(Position(-1, 0), ("aa", "bb", "cc", "dd"))
    assert fb.rows() == ["bb", "cc"]


def test_fully_off_buffer_is_dropped():
    fb = FrameBuffer(2, 2)
    for origin in [Position(-5, 0), Position(5, 0), Position(0, -5), Position(0, 5)]:
        fb.composite(origin, ("xx", "xx"))
    assert fb.rows() == ["  ", "  "]


def test_no_wraparound():
    fb = FrameBuffer(2, 3)
    fb.composite(Position(0, 2), ("abc",))
    assert fb.rows() == ["  a", "   "]


def test_empty_sprite():
    fb = FrameBuffer(1, 1)
    fb.composite(Position(0, 0), ())
    assert fb.rows() == [" "]


# --- clear() ---

def test_clear_resets_every_cell():
    fb = FrameBuffer(2, 2)
    fb.composite(Position(0, 0), ("ab", "cd"))
    fb.clear()
    assert fb.render() == "  \n  \n"
