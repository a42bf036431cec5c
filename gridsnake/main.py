import argparse
import json
import logging
import os
from typing import Any, Dict, Optional

from . import config
from .players.base import Player
from .players.variant_registry import AVAILABLE_VARIANTS, get_player_class
from .services.renderer import save_frames
from .services.replay import save_replay, state_from_snapshot
from .session import GameSession

logger = logging.getLogger(__name__)


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(
    session: GameSession,
    player: Player,
    max_ticks: int,
    frame_ms: Optional[float] = None,
) -> Dict[str, Any]:
    """
    Runs a headless game, feeding fixed frame deltas into the session clock.

    Args:
        session: The session to drive (its current game is played).
        player: Asked for a move whenever the input queue is empty; moves are queued like key presses.
        max_ticks: Stop after this many steps if the snake is still alive.
        frame_ms: Elapsed time per frame. Defaults to one tick interval.

    Returns:
        A dictionary summarizing the game (game_id, score, ticks, death_reason).
    """
    if frame_ms is None:
        frame_ms = session.rules.tick_interval
    if frame_ms <= 0:
        raise ValueError(f"frame_ms must be positive, got {frame_ms}")

    while not session.dead and session.state.tick < max_ticks:
        # Only ask again once the last move has been consumed; stale moves
        # would otherwise pile up while the first step delay runs down.
        if not session.state.input_queue:
            move = player.get_move(session.state, session.rules)
            if move is not None:
                session.queue(move)
        session.update(frame_ms)

    return {
        "game_id": session.game_id,
        "seed": session.current_seed,
        "score": session.score,
        "ticks": session.state.tick,
        "length": len(session.state.body),
        "dead": session.dead,
        "death_reason": session.state.death_reason,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a headless snake game with an automated player."
    )
    parser.add_argument("--player", type=str, default="random", choices=AVAILABLE_VARIANTS,
                        help="Automated player to use (default: random)")
    parser.add_argument("--width", type=int, default=None,
                        help="Width of the field in cells (default: GRIDSNAKE_WIDTH or 50)")
    parser.add_argument("--height", type=int, default=None,
                        help="Height of the field in cells (default: GRIDSNAKE_HEIGHT or 40)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and the player (default: GRIDSNAKE_SEED or random)")
    parser.add_argument("--max-ticks", type=int, default=1000,
                        help="Maximum number of steps to simulate (default: 1000)")
    parser.add_argument("--frame-ms", type=float, default=None,
                        help="Simulated milliseconds per frame (default: one tick interval)")
    parser.add_argument("--replay-out", type=str, default=None,
                        help="Write a JSON replay to this directory (default: GRIDSNAKE_OUTPUT_DIR, if set)")
    parser.add_argument("--frames-dir", type=str, default=None,
                        help="Write one PNG per recorded frame to this directory")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (default: GRIDSNAKE_LOG_LEVEL or WARNING)")
    return parser


# -------------------------------
# Main Entry Point
# -------------------------------
def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=(args.log_level or config.get_log_level()).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        seed = args.seed if args.seed is not None else config.get_seed()
        rules = config.load_rules(width=args.width, height=args.height)
    except ValueError as e:
        parser.error(str(e))

    replay_dir = args.replay_out or config.get_output_dir()
    record = bool(replay_dir or args.frames_dir)
    session = GameSession(rules, seed=seed, record_history=record)
    player = get_player_class(args.player)(seed=seed)

    result = run_simulation(session, player, max_ticks=args.max_ticks, frame_ms=args.frame_ms)

    print(session.board())

    if replay_dir:
        result["replay_path"] = save_replay(session, output_dir=replay_dir)

    if args.frames_dir:
        states = [state_from_snapshot(frame) for frame in session.history]
        paths = save_frames(rules, states, os.path.join(args.frames_dir, session.game_id))
        result["frames_written"] = len(paths)

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
