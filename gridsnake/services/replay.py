"""
Replay storage for gridsnake sessions.

A replay is a JSON document:

    {
      "metadata": {game_id, seed, start_time, end_time, board, final_score,
                   death_info, ticks},
      "frames": [GameState.to_dict() + {"score": n}, ...]
    }

Frames are only available when the session was created with
record_history=True, one per engine step plus the starting state; otherwise
"frames" holds just the final snapshot.
"""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from ..domain.constants import Direction
from ..domain.game_state import GameState
from ..domain.rules import GameRules
from ..domain.vec import Vec2

logger = logging.getLogger(__name__)


def rules_to_dict(rules: GameRules) -> Dict[str, Any]:
    return {
        "width": rules.width,
        "height": rules.height,
        "step_delay": rules.step_delay,
        "tick_interval": rules.tick_interval,
        "initial_body": [list(cell) for cell in rules.initial_body],
        "initial_facing": rules.initial_facing.name,
    }


def rules_from_dict(data: Dict[str, Any]) -> GameRules:
    return GameRules(
        width=data["width"],
        height=data["height"],
        step_delay=data["step_delay"],
        tick_interval=data["tick_interval"],
        initial_body=tuple(Vec2(*cell) for cell in data["initial_body"]),
        initial_facing=Direction.from_name(data["initial_facing"]),
    )


def state_from_snapshot(snapshot: Dict[str, Any]) -> GameState:
    """
    Rebuild a GameState from a recorded frame, for rendering.
    The rebuilt state has a fresh rng and a zero timer.
    """
    state = GameState(
        body=[Vec2(*cell) for cell in snapshot["body"]],
        facing=Direction.from_name(snapshot["facing"]),
        time_accumulator=0.0,
    )
    state.input_queue.extend(Direction.from_name(d) for d in snapshot.get("input_queue", []))
    food = snapshot.get("food")
    state.food = Vec2(*food) if food is not None else None
    state.tick = snapshot.get("tick", 0)
    state.dead = snapshot.get("dead", False)
    state.death_reason = snapshot.get("death_reason")
    return state


def build_replay(session) -> Dict[str, Any]:
    """
    Convert a GameSession into a JSON-serializable replay dict.
    """
    frames = list(session.history) if session.history else [session.snapshot()]

    metadata = {
        "game_id": session.game_id,
        "seed": session.current_seed,
        "start_time": datetime.fromtimestamp(session.start_time, tz=timezone.utc).isoformat(),
        "end_time": datetime.now(timezone.utc).isoformat(),
        "board": rules_to_dict(session.rules),
        "final_score": session.score,
        "ticks": session.state.tick,
        "death_info": {
            "reason": session.state.death_reason,
            "tick": session.state.tick,
        } if session.state.dead else None,
    }

    return {
        "metadata": metadata,
        "frames": frames,
    }


def save_replay(session, filename: Optional[str] = None, output_dir: str = "completed_games") -> str:
    """
    Write the session replay to output_dir and return the file path.
    """
    if filename is None:
        filename = f"snake_game_{session.game_id}.json"

    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, filename)
    with open(path, "w") as f:
        json.dump(build_replay(session), f, indent=2)

    logger.info(f"Saved replay for game {session.game_id} to {path}")
    return path


def load_replay(path: str) -> Tuple[Dict[str, Any], list]:
    """
    Load a replay file.

    Returns:
        (metadata, frames)

    Raises:
        ValueError: If the file is not a gridsnake replay
    """
    with open(path, "r") as f:
        data = json.load(f)

    if "metadata" not in data or "frames" not in data:
        raise ValueError(f"{path} is not a gridsnake replay (missing metadata or frames)")

    return data["metadata"], data["frames"]
