"""
Key press player - replays keyboard codes through the board policy.
"""

from typing import Iterable, Optional

from domain.board import BoardPolicy
from domain.constants import Direction
from domain.game_state import GameState
from .base import Player


class KeyPressPlayer(Player):
    """
    Feeds one key code per tick to BoardPolicy.get_direction().

    Unrecognized codes and an exhausted sequence both yield None, so the
    snake keeps its heading.
    """

    def __init__(self, key_codes: Iterable[str], board: BoardPolicy):
        self.key_codes = iter(key_codes)
        self.board = board

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        code = next(self.key_codes, None)
        if code is None:
            return None
        return self.board.get_direction(code)
