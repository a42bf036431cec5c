"""
Board rendering for gridsnake.

Turns the engine's cells into something a person can look at:
1. board_matrix() - a numpy grid of cell kinds
2. print_board() - a text board for terminals and logs
3. BoardRenderer - Pillow frames: black tiles on a white background
   with a one pixel gutter between tiles

The engine never imports this module; hosts call it with a rules/state pair.
"""

import logging
import os
from typing import List, Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw

from ..domain.game_state import GameState
from ..domain.rules import GameRules

logger = logging.getLogger(__name__)

# Cell kinds in board_matrix()
EMPTY = 0
BODY = 1
HEAD = 2
FOOD = 3

UNIT_SIZE = 10  # Size of each grid cell in pixels


class ColorScheme:
    """Colors used by BoardRenderer"""

    BACKGROUND = "#FFFFFF"
    SNAKE = "#000000"
    HEAD = "#000000"
    FOOD = "#000000"
    DEAD_HEAD = "#EA2014"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def board_matrix(rules: GameRules, state: GameState) -> np.ndarray:
    """
    Return a (height, width) int8 array with EMPTY, BODY, HEAD and FOOD cells.
    Row 0 is the top of the field.
    """
    grid = np.full((rules.height, rules.width), EMPTY, dtype=np.int8)
    if state.food is not None:
        grid[state.food.y, state.food.x] = FOOD
    for cell in state.body[:-1]:
        grid[cell.y, cell.x] = BODY
    head = state.body[-1]
    grid[head.y, head.x] = HEAD
    return grid


def print_board(rules: GameRules, state: GameState) -> str:
    """
    Returns a string representation of the board with:
    . = empty space
    F = food
    o = snake body
    @ = snake head (X once dead)
    (0,0) is at the top left, with x-axis labels (mod 10) at the bottom.
    """
    symbols = {EMPTY: '.', BODY: 'o', HEAD: 'X' if state.dead else '@', FOOD: 'F'}
    grid = board_matrix(rules, state)

    result = []
    for y in range(rules.height):
        result.append(f"{y:2d} {' '.join(symbols[int(v)] for v in grid[y])}")

    # Add x-axis labels at the bottom
    result.append("   " + " ".join(str(i % 10) for i in range(rules.width)))

    return "\n".join(result)


class BoardRenderer:
    """Render game states as Pillow images"""

    def __init__(self, unit_size: int = UNIT_SIZE):
        if unit_size < 2:
            raise ValueError(f"unit_size must be at least 2 pixels, got {unit_size}")
        self.unit_size = unit_size

    def frame_size(self, rules: GameRules) -> Tuple[int, int]:
        # The last column and row have no trailing gutter.
        return (rules.width * self.unit_size - 1, rules.height * self.unit_size - 1)

    def render_frame(self, rules: GameRules, state: GameState) -> Image.Image:
        """Render a single frame of the game"""
        img = Image.new('RGB', self.frame_size(rules), hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)

        for cell in state.body[:-1]:
            self._draw_tile(draw, cell.x, cell.y, hex_to_rgb(ColorScheme.SNAKE))

        head = state.body[-1]
        head_color = ColorScheme.DEAD_HEAD if state.dead else ColorScheme.HEAD
        self._draw_tile(draw, head.x, head.y, hex_to_rgb(head_color))

        if state.food is not None:
            self._draw_tile(draw, state.food.x, state.food.y, hex_to_rgb(ColorScheme.FOOD))

        return img

    def _draw_tile(self, draw: ImageDraw.ImageDraw, x: int, y: int, color: Tuple[int, int, int]):
        """Draw a single tile, leaving a one pixel gutter on the right and bottom"""
        left = x * self.unit_size
        top = y * self.unit_size
        draw.rectangle(
            [left, top, left + self.unit_size - 2, top + self.unit_size - 2],
            fill=color
        )

    def frame_array(self, rules: GameRules, state: GameState) -> np.ndarray:
        """Render a frame as an (height, width, 3) uint8 array"""
        return np.array(self.render_frame(rules, state))

    def save_frame(self, rules: GameRules, state: GameState, path: str) -> str:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        self.render_frame(rules, state).save(path)
        return path


def save_frames(
    rules: GameRules,
    states: List[GameState],
    output_dir: str,
    prefix: str = "frame",
    renderer: Optional[BoardRenderer] = None,
) -> List[str]:
    """
    Write one PNG per state into output_dir.

    Returns:
        The written file paths, in order
    """
    renderer = renderer or BoardRenderer()
    os.makedirs(output_dir, exist_ok=True)

    paths = []
    for i, state in enumerate(states):
        path = os.path.join(output_dir, f"{prefix}_{i:05d}.png")
        renderer.save_frame(rules, state, path)
        paths.append(path)

    logger.info(f"Saved {len(paths)} frames to {output_dir}")
    return paths
