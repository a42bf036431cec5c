"""
Player and input implementations for gridsnake.

This module contains the host-side sources of direction commands:
keyboard input adapters and automated players.
"""

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer
from .input import InputAdapter, DEFAULT_BINDINGS
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
    'InputAdapter',
    'DEFAULT_BINDINGS',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
