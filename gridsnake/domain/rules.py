"""
GameRules - immutable configuration for one game session.
"""

from dataclasses import dataclass, field
from typing import Tuple

from .constants import (
    Direction,
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    DEFAULT_STEP_DELAY_MS,
    DEFAULT_TICK_MS,
    DEFAULT_INITIAL_BODY,
    DEFAULT_FACING,
)
from .vec import Vec2


@dataclass(frozen=True)
class GameRules:
    """
    Per-session configuration, fixed for the lifetime of a game.

    Attributes:
        width, height: size of the playfield in cells
        step_delay: milliseconds before the first step of a fresh game
        tick_interval: milliseconds between steps once the game is running
        initial_body: starting cells, tail first, head last
        initial_facing: starting direction
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    step_delay: float = DEFAULT_STEP_DELAY_MS
    tick_interval: float = DEFAULT_TICK_MS
    initial_body: Tuple[Vec2, ...] = field(default_factory=lambda: tuple(DEFAULT_INITIAL_BODY))
    initial_facing: Direction = DEFAULT_FACING

    def __post_init__(self):
        # Accept plain (x, y) pairs and lists from config or tests.
        body = tuple(Vec2(*cell) for cell in self.initial_body)
        object.__setattr__(self, "initial_body", body)

        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Field must have a positive size, got {self.width}x{self.height}.")
        if self.tick_interval <= 0:
            raise ValueError(f"tick_interval must be positive, got {self.tick_interval}.")
        if self.step_delay < 0:
            raise ValueError(f"step_delay must not be negative, got {self.step_delay}.")
        if not body:
            raise ValueError("initial_body must contain at least one cell.")

        for cell in body:
            if not cell.in_bounds(self.width, self.height):
                raise ValueError(f"Initial body cell out of bounds at {tuple(cell)}.")
        if len(set(body)) != len(body):
            raise ValueError("Initial body cells must be distinct.")
        for prev, cur in zip(body, body[1:]):
            if not prev.is_adjacent(cur):
                raise ValueError(f"Initial body cells {tuple(prev)} and {tuple(cur)} are not adjacent.")

    @property
    def cell_count(self) -> int:
        return self.width * self.height
