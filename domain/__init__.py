"""
Domain entities for the snake rules engine.

This module contains the core game entities: the snake, its cells and the
board policy. They perform no I/O and no timing.
"""

from .constants import (
    Direction, Collision,
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITE_DIRECTIONS,
)
from .coordinate import Coordinate, CellItem
from .snake import Snake
from .board import BoardPolicy
from .game_state import GameState

__all__ = [
    'Direction', 'Collision',
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITE_DIRECTIONS',
    'Coordinate', 'CellItem',
    'Snake',
    'BoardPolicy',
    'GameState',
]
