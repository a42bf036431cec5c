"""
Tests for the board renderer helpers.
"""

import os

import numpy as np
import pytest

from gridsnake.domain import RIGHT, Vec2, GameRules, GameState
from gridsnake.services.renderer import (
    BoardRenderer,
    board_matrix,
    print_board,
    save_frames,
    hex_to_rgb,
    EMPTY, BODY, HEAD, FOOD,
)


@pytest.fixture
def rules():
    return GameRules(width=6, height=4, initial_body=[(0, 1), (1, 1), (2, 1)])


@pytest.fixture
def state(rules):
    s = GameState(body=list(rules.initial_body), facing=RIGHT, time_accumulator=0)
    s.food = Vec2(4, 2)
    return s


def test_hex_to_rgb():
    assert hex_to_rgb("#EA2014") == (234, 32, 20)


def test_board_matrix_marks_cells(rules, state):
    grid = board_matrix(rules, state)
    assert grid.shape == (4, 6)
    assert grid[1, 0] == BODY
    assert grid[1, 1] == BODY
    assert grid[1, 2] == HEAD
    assert grid[2, 4] == FOOD
    assert int((grid == EMPTY).sum()) == 6 * 4 - 4


def test_board_matrix_without_food(rules, state):
    state.food = None
    assert int((board_matrix(rules, state) == FOOD).sum()) == 0


def test_print_board(rules, state):
    board = print_board(rules, state)
    lines = board.split("\n")
    assert len(lines) == rules.height + 1
    assert lines[1] == " 1 o o @ . . ."
    assert lines[2] == " 2 . . . . F ."
    assert lines[-1] == "   0 1 2 3 4 5"


def test_print_board_dead_head(rules, state):
    state.dead = True
    assert "X" in print_board(rules, state)
    assert "@" not in print_board(rules, state)


class TestBoardRenderer:
    """Tests for the Pillow renderer."""

    def test_frame_size_has_no_trailing_gutter(self, rules):
        assert BoardRenderer().frame_size(rules) == (59, 39)

    def test_tiles_and_gutter(self, rules, state):
        img = BoardRenderer().render_frame(rules, state)
        assert img.size == (59, 39)

        # head tile at (2, 1)
        assert img.getpixel((20, 10)) == (0, 0, 0)
        assert img.getpixel((28, 18)) == (0, 0, 0)
        # gutter to the right of it
        assert img.getpixel((29, 10)) == (255, 255, 255)
        # empty cell
        assert img.getpixel((50, 30)) == (255, 255, 255)
        # food at (4, 2)
        assert img.getpixel((45, 25)) == (0, 0, 0)

    def test_dead_head_is_highlighted(self, rules, state):
        state.dead = True
        img = BoardRenderer().render_frame(rules, state)
        assert img.getpixel((20, 10)) == (234, 32, 20)

    def test_frame_array(self, rules, state):
        arr = BoardRenderer().frame_array(rules, state)
        assert isinstance(arr, np.ndarray)
        assert arr.shape == (39, 59, 3)

    def test_unit_size_too_small(self):
        with pytest.raises(ValueError):
            BoardRenderer(unit_size=1)

    def test_save_frames(self, rules, state, tmp_path):
        paths = save_frames(rules, [state, state], str(tmp_path / "frames"))
        assert len(paths) == 2
        assert all(os.path.exists(p) for p in paths)
        assert os.path.basename(paths[0]) == "frame_00000.png"
