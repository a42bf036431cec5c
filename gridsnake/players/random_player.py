"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from ..domain.constants import Direction, VALID_MOVES
from ..domain.game_state import GameState
from ..domain.rules import GameRules
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls and self-collisions.
    """

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def get_move(self, game_state: GameState, rules: GameRules) -> Direction:
        body = game_state.body
        head = body[-1]

        # Filter out moves that:
        # 1. Reverse into the neck
        # 2. Hit walls
        # 3. Hit own body (except tail, which will move)
        valid_moves: List[Direction] = []
        for move in sorted(VALID_MOVES, key=lambda d: d.id):
            if len(body) > 1 and move.is_opposite(game_state.facing):
                continue

            target = head + move.displacement
            if not target.in_bounds(rules.width, rules.height):
                continue

            if target in body[1:]:
                continue

            valid_moves.append(move)

        # If no valid moves, just keep going (we'll die anyway)
        if not valid_moves:
            return game_state.facing

        return self.rng.choice(valid_moves)
