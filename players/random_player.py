"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import Direction, VALID_MOVES
from domain.coordinate import Coordinate
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a valid direction that avoids walls and self-collisions.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, game_state: GameState) -> Direction:
        snake_positions = game_state.snake_positions
        head = Coordinate(*snake_positions[0])
        size = game_state.grid_size

        # Filter out moves that:
        # 1. Hit walls
        # 2. Hit own body (except tail, which will move unless the snake is growing)
        blocked = snake_positions if game_state.growing else snake_positions[:-1]
        valid_moves: List[Direction] = []
        for move in sorted(VALID_MOVES):
            new_x, new_y = head.translate(move)
            if new_x < 0 or new_x >= size or new_y < 0 or new_y >= size:
                continue

            if (new_x, new_y) in blocked:
                continue

            valid_moves.append(move)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(sorted(VALID_MOVES))

        return self.rng.choice(valid_moves)
