"""
GameState entity - the mutable simulation state of one game.
"""

import random
from collections import deque
from typing import Any, Deque, Dict, List, Optional

from .constants import Direction
from .vec import Vec2


class GameState:
    """
    The live state of a game, owned by the engine.

    Attributes:
        body: list of cells from tail (index 0) to head (last element)
        facing: the direction committed on the last step
        input_queue: pending direction commands, oldest first
        food: the current food cell, None only before the first placement
        time_accumulator: milliseconds left before the next step
        rng: random source used for food placement
        tick: number of steps taken so far
        dead: set once a step has ended the game
        death_reason: 'wall' or 'self' once dead
    """

    def __init__(
        self,
        body: List[Vec2],
        facing: Direction,
        time_accumulator: float,
        rng: Optional[random.Random] = None,
    ):
        self.body = body
        self.facing = facing
        self.input_queue: Deque[Direction] = deque()
        self.food: Optional[Vec2] = None
        self.time_accumulator = time_accumulator
        self.rng = rng if rng is not None else random.Random()
        self.tick = 0
        self.dead = False
        self.death_reason: Optional[str] = None

    @property
    def head(self) -> Vec2:
        """Return the head position (last element)."""
        return self.body[-1]

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly snapshot (the rng and timer are not included)."""
        return {
            "tick": self.tick,
            "body": [list(cell) for cell in self.body],
            "facing": self.facing.name,
            "input_queue": [d.name for d in self.input_queue],
            "food": list(self.food) if self.food is not None else None,
            "dead": self.dead,
            "death_reason": self.death_reason,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, length={len(self.body)}, "
            f"facing={self.facing.name}, food={self.food}, dead={self.dead}>"
        )
