"""
GameSession - the host side of a single-player game.

Owns what the engine deliberately does not: the score, the dead flag that
stops the clock, the per-session input adapter, restart, and an optional
history of snapshots for replays.
"""

import logging
import random
import time
import uuid
from typing import Any, Dict, List, Optional

from . import engine
from .domain.constants import Direction
from .domain.game_state import GameState
from .domain.rules import GameRules
from .players.input import InputAdapter, R
from .services.renderer import print_board

logger = logging.getLogger(__name__)


class GameSession:
    """
    Manages:
      - Rules and the current GameState
      - Score
      - Timing gate and death
      - Restart
      - History for replay
    """

    def __init__(
        self,
        rules: GameRules,
        seed: Optional[int] = None,
        record_history: bool = False,
        input_adapter: Optional[InputAdapter] = None,
        game_id: Optional[str] = None,
    ):
        self.rules = rules
        self.seed = seed
        self.record_history = record_history
        self.game_id = game_id or str(uuid.uuid4())
        self.start_time = time.time()

        # Seeds for later games are drawn from here so a seeded session
        # replays identically across restarts.
        self._seed_source = random.Random(seed)

        self.input = input_adapter if input_adapter is not None else InputAdapter()
        self.input.on_direction(self.queue)
        self.input.on_key(R, self.reset)

        self.games_played = 0
        self._new_state(seed)

    def _new_state(self, seed: Optional[int]):
        self.current_seed = seed
        self.state: GameState = engine.start_game(self.rules, seed)
        self.score = 0
        self.dead = False
        self.history: List[Dict[str, Any]] = []
        self.games_played += 1
        self.record()

    def _bump_score(self):
        self.score += 1

    def queue(self, direction: Direction):
        engine.queue_direction(self.state, direction)

    def update(self, elapsed: float) -> bool:
        """
        Feed elapsed milliseconds to the timing gate.

        Records one history frame per step run, so a long frame that catches
        up several ticks keeps every one of them.

        Returns True if the snake is dead. Does nothing once dead until reset().
        """
        if self.dead:
            return True

        self.dead = engine.advance(
            self.rules, self.state, elapsed, on_food=self._bump_score, on_step=self.record
        )
        if self.dead:
            logger.info(
                "Game %s over on tick %d: %s (score %d)",
                self.game_id, self.state.tick, self.state.death_reason, self.score
            )
        return self.dead

    def tick(self) -> bool:
        """Force exactly one step, bypassing the clock."""
        if self.dead:
            return True
        self.dead = engine.step(self.rules, self.state, on_food=self._bump_score)
        self.record()
        return self.dead

    def reset(self):
        """Discard the current game and start a fresh one with a zeroed score."""
        seed = self._seed_source.randrange(2 ** 32)
        logger.info("Resetting game %s after %d ticks (score %d)", self.game_id, self.state.tick, self.score)
        self._new_state(seed)

    def record(self):
        if self.record_history:
            self.history.append(self.snapshot())

    def snapshot(self) -> Dict[str, Any]:
        snap = self.state.to_dict()
        snap["score"] = self.score
        return snap

    def board(self) -> str:
        return print_board(self.rules, self.state)

    def __repr__(self):
        return f"<GameSession id={self.game_id}, score={self.score}, dead={self.dead}, state={self.state!r}>"
