"""
Single-snake game engine.

The engine is a set of plain functions over a GameRules / GameState pair:
construct a game, place food, queue input, advance one step, and run the
fixed-rate timing gate. It never draws, reads devices, or keeps a score;
the host owns those and is notified through the ``on_food`` callback.
"""

import logging
import random
from typing import Callable, Optional

from .domain.constants import Direction, DEATH_SELF, DEATH_WALL
from .domain.game_state import GameState
from .domain.rules import GameRules
from .domain.vec import Vec2

logger = logging.getLogger(__name__)

FoodCallback = Optional[Callable[[], None]]
StepCallback = Optional[Callable[[], None]]

# Most steps a single advance() call may run; longer pauses are dropped.
MAX_CATCH_UP_STEPS = 5


def new_game(rules: GameRules, rng: Optional[random.Random] = None) -> GameState:
    """
    Create a new game with no food placed yet.

    The caller places food afterwards (see ``start_game``).
    """
    return GameState(
        body=list(rules.initial_body),
        facing=rules.initial_facing,
        time_accumulator=rules.step_delay,
        rng=rng,
    )


def place_food(rules: GameRules, state: GameState) -> Vec2:
    """
    Return a random cell that is not part of the snake.

    Uses rejection sampling, so it terminates almost surely while any cell is
    free. On a completely full field it never returns. step() reaches that
    case when the head eats the last free cell, since the new food is placed
    after the head is appended.
    """
    occupied = set(state.body)
    while True:
        x = state.rng.randrange(rules.width)
        y = state.rng.randrange(rules.height)
        pos = Vec2(x, y)
        if pos not in occupied:
            return pos


def start_game(rules: GameRules, seed: Optional[int] = None) -> GameState:
    """Create a game and place its first food."""
    state = new_game(rules, rng=random.Random(seed))
    state.food = place_food(rules, state)
    return state


def queue_direction(state: GameState, direction: Direction) -> None:
    """Buffer a direction command. Validation happens when a step consumes it."""
    state.input_queue.append(direction)


def _next_direction(state: GameState) -> Direction:
    # Accept the first queued turn that is neither the current facing nor its
    # reverse; anything behind it stays queued for later steps.
    while state.input_queue:
        candidate = state.input_queue.popleft()
        if candidate == state.facing or candidate.is_opposite(state.facing):
            continue
        return candidate
    return state.facing


def step(rules: GameRules, state: GameState, on_food: FoodCallback = None) -> bool:
    """
    Advance the game by one tick.

    Returns True if the snake died. A dead state is left untouched by any
    further calls, which keep returning True.
    """
    if state.dead:
        return True

    state.facing = _next_direction(state)
    next_head = state.head + state.facing.displacement
    eats = state.food is not None and next_head == state.food

    # Collisions are checked against the body as it will be after this tick,
    # so the cell the tail vacates is free. A dying step leaves the body as it was.
    remaining = state.body if eats else state.body[1:]
    if not next_head.in_bounds(rules.width, rules.height):
        return _die(state, DEATH_WALL, next_head)
    if next_head in remaining:
        return _die(state, DEATH_SELF, next_head)

    if not eats:
        state.body.pop(0)
    state.body.append(next_head)
    state.tick += 1

    if eats:
        # grow: the tail was kept; new food must also avoid the new head
        state.food = place_food(rules, state)
        logger.debug("Food eaten at %s on tick %d, new food at %s", tuple(next_head), state.tick, tuple(state.food))
        if on_food is not None:
            on_food()
    return False


def _die(state: GameState, reason: str, cell: Vec2) -> bool:
    state.dead = True
    state.death_reason = reason
    logger.debug("Snake died (%s) moving into %s on tick %d", reason, tuple(cell), state.tick)
    return True


def advance(
    rules: GameRules,
    state: GameState,
    elapsed: float,
    on_food: FoodCallback = None,
    on_step: StepCallback = None,
) -> bool:
    """
    Feed ``elapsed`` milliseconds into the timing gate.

    Runs one step every time the accumulator drops below zero, topping it up
    by ``rules.tick_interval`` each time, so the simulation speed does not
    depend on how often the host calls this. ``elapsed`` is capped at
    MAX_CATCH_UP_STEPS tick intervals, so a host resuming after a long pause
    does not replay the whole gap in one call.

    ``on_step`` is called after every step, including the one that kills the
    snake. Returns True once dead.
    """
    if state.dead:
        return True

    elapsed = min(elapsed, rules.tick_interval * MAX_CATCH_UP_STEPS)
    state.time_accumulator -= elapsed
    while state.time_accumulator < 0:
        state.time_accumulator += rules.tick_interval
        died = step(rules, state, on_food)
        if on_step is not None:
            on_step()
        if died:
            return True
    return False
