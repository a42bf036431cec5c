"""
Scripted player - replays a fixed list of moves, one per tick.
"""

from typing import Iterable, List, Optional, Union

from ..domain.constants import Direction
from ..domain.game_state import GameState
from ..domain.rules import GameRules
from .base import Player


class ScriptedPlayer(Player):
    """
    Returns the next scripted move each tick. ``None`` entries mean no input;
    once the script runs out the player stops issuing moves.
    """

    def __init__(self, moves: Iterable[Union[Direction, str, None]]):
        self.moves: List[Optional[Direction]] = [
            Direction.from_name(m) if isinstance(m, str) else m for m in moves
        ]
        self.index = 0

    def get_move(self, game_state: GameState, rules: GameRules) -> Optional[Direction]:
        if self.index >= len(self.moves):
            return None
        move = self.moves[self.index]
        self.index += 1
        return move
