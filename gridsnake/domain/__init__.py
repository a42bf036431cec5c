"""
Domain entities for the gridsnake game engine.

This module contains the core game entities that are independent of
how time is delivered, how input is captured and how frames are drawn.
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, Direction
from .vec import Vec2
from .rules import GameRules
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'Direction',
    'Vec2',
    'GameRules',
    'GameState',
]
