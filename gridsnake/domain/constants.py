"""
Game constants for gridsnake.
"""

from enum import Enum

from .vec import Vec2


class Direction(Enum):
    """
    The four cardinal directions.

    Each value is (id, displacement). Opposite directions carry ids that are
    additive inverses (UP/DOWN = -1/1, LEFT/RIGHT = -2/2), so a reversal is
    detected with ``new.id == -current.id``.
    """

    UP = (-1, Vec2(0, -1))
    DOWN = (1, Vec2(0, 1))
    LEFT = (-2, Vec2(-1, 0))
    RIGHT = (2, Vec2(1, 0))

    def __init__(self, id: int, displacement: Vec2):
        self.id = id
        self.displacement = displacement

    def is_opposite(self, other: "Direction") -> bool:
        return self.id == -other.id

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown direction '{name}'. Expected one of: UP, DOWN, LEFT, RIGHT")


# Movement directions
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Game settings
DEFAULT_WIDTH = 50
DEFAULT_HEIGHT = 40
DEFAULT_STEP_DELAY_MS = 200.0
DEFAULT_TICK_MS = 1000 / 30
DEFAULT_INITIAL_BODY = [Vec2(0, 4), Vec2(1, 4), Vec2(2, 4), Vec2(3, 4), Vec2(4, 4)]
DEFAULT_FACING = RIGHT

# Death reasons
DEATH_WALL = "wall"
DEATH_SELF = "self"
