"""
gridsnake - a grid-based snake game engine.

The engine (gridsnake.engine) is a pure, time-stepped state machine. Input
adapters, rendering, replays and the CLI live around it and are never
imported by it.
"""

from .domain import UP, DOWN, LEFT, RIGHT, Direction, Vec2, GameRules, GameState
from .engine import new_game, place_food, queue_direction, step, start_game, advance

__version__ = "0.1.0"

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'Direction', 'Vec2', 'GameRules', 'GameState',
    'new_game', 'place_food', 'queue_direction', 'step', 'start_game', 'advance',
]
