"""
Player implementations for the snake game.

This module contains the player abstractions that choose the snake's
direction each tick.
"""

from .base import Player
from .random_player import RandomPlayer
from .key_press_player import KeyPressPlayer
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'RandomPlayer',
    'KeyPressPlayer',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
