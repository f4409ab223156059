"""
Base player interface for the game engine.
"""

from typing import Optional

from domain.constants import Direction
from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player picks the direction for the next tick given the current game
    state. Returning None keeps the snake's current heading.
    """

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            A Direction, or None for "no change this tick"
        """
        raise NotImplementedError
