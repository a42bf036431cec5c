"""
Vec2 value type for grid coordinates.
"""

from typing import NamedTuple


class Vec2(NamedTuple):
    """Integer 2D coordinate. x grows to the right, y grows downward."""

    x: int
    y: int

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def in_bounds(self, width: int, height: int) -> bool:
        return 0 <= self.x < width and 0 <= self.y < height

    def is_adjacent(self, other: "Vec2") -> bool:
        return abs(self.x - other.x) + abs(self.y - other.y) == 1
