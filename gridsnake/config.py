"""
Environment-driven configuration for gridsnake.

Values are read from the process environment (and a local .env file, if
present) with the defaults from domain.constants:

- GRIDSNAKE_WIDTH / GRIDSNAKE_HEIGHT: field size in cells
- GRIDSNAKE_STEP_DELAY_MS: delay before the first step
- GRIDSNAKE_TICK_MS: delay between steps
- GRIDSNAKE_SEED: food placement seed (unset = random)
- GRIDSNAKE_LOG_LEVEL: logging level for the CLI
- GRIDSNAKE_OUTPUT_DIR: where the CLI writes replays when --replay-out is not
  given (unset = no replay)
"""

import os
from typing import Optional

from dotenv import load_dotenv

from .domain.constants import (
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    DEFAULT_STEP_DELAY_MS,
    DEFAULT_TICK_MS,
)
from .domain.rules import GameRules

load_dotenv()


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'")


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got '{raw}'")


def get_seed() -> Optional[int]:
    raw = os.getenv("GRIDSNAKE_SEED", "").strip()
    if not raw:
        return None
    return _get_int("GRIDSNAKE_SEED", 0)


def get_log_level() -> str:
    return os.getenv("GRIDSNAKE_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"


def get_output_dir() -> Optional[str]:
    d = os.getenv("GRIDSNAKE_OUTPUT_DIR", "").strip()
    return d or None


def load_rules(**overrides) -> GameRules:
    """
    Build GameRules from the environment. Keyword arguments that are not
    None take precedence over environment values.
    """
    values = {
        "width": _get_int("GRIDSNAKE_WIDTH", DEFAULT_WIDTH),
        "height": _get_int("GRIDSNAKE_HEIGHT", DEFAULT_HEIGHT),
        "step_delay": _get_float("GRIDSNAKE_STEP_DELAY_MS", DEFAULT_STEP_DELAY_MS),
        "tick_interval": _get_float("GRIDSNAKE_TICK_MS", DEFAULT_TICK_MS),
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    return GameRules(**values)
