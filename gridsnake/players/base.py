"""
Base player interface for the game host.
"""

from typing import Optional

from ..domain.constants import Direction
from ..domain.game_state import GameState
from ..domain.rules import GameRules


class Player:
    """
    Base class/interface for player logic.

    A player looks at the current state and returns the direction it wants
    queued for the next step, or None to keep going straight.
    """

    def get_move(self, game_state: GameState, rules: GameRules) -> Optional[Direction]:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game
            rules: Rules of the running session

        Returns:
            A Direction, or None for no input this tick
        """
        raise NotImplementedError
