"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Optional, Tuple

from .constants import Direction


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        round_number: which round we are in (0-based)
        snake_positions: list of (x, y) from head to tail
        alive: whether the snake is still alive
        score: apples eaten so far
        grid_size: cells per side of the square board
        apple: (x, y) of the apple, or None when the board is full
        direction: the last accepted direction
        move_history: directions applied so far, one per round
        max_rounds: optional upper limit on total rounds
        growing: the snake grows on the next move, so its tail stays put
    """

    def __init__(
        self,
        round_number: int,
        snake_positions: List[Tuple[int, int]],
        alive: bool,
        score: int,
        grid_size: int,
        apple: Optional[Tuple[int, int]],
        direction: Direction,
        move_history: List[Direction],
        max_rounds: Optional[int] = None,
        growing: bool = False
    ):
        self.round_number = round_number
        self.snake_positions = snake_positions
        self.alive = alive
        self.score = score
        self.grid_size = grid_size
        self.apple = apple
        self.direction = direction
        self.move_history = move_history
        self.max_rounds = max_rounds
        self.growing = growing

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = apple
        H = snake head
        T = snake body
        (0,0) is at bottom left with x-axis labels at bottom.
        Cells outside the grid (a head that hit the wall) are not drawn.
        """
        size = self.grid_size
        board = [['.' for _ in range(size)] for _ in range(size)]

        if self.apple is not None:
            ax, ay = self.apple
            board[ay][ax] = 'A'

        for pos_idx, (x, y) in enumerate(self.snake_positions):
            if not (0 <= x < size and 0 <= y < size):
                continue
            board[y][x] = 'H' if pos_idx == 0 else 'T'

        result = []
        # Print rows in reverse order (bottom to top)
        for y in range(size - 1, -1, -1):
            result.append(f"{y:2d} {' '.join(board[y])}")

        result.append("   " + " ".join(str(i % 10) for i in range(size)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState round={self.round_number}, apple={self.apple}, "
            f"length={len(self.snake_positions)}, score={self.score}>"
        )
