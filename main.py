import argparse
import json
import logging
import os
import random
import time
from typing import Dict, List, Optional, Any

from dotenv import load_dotenv

from domain import (
    BoardPolicy,
    CellItem,
    Collision,
    Coordinate,
    Direction,
    GameState,
    Snake,
    OPPOSITE_DIRECTIONS,
    RIGHT,
)
from domain.constants import HEAD_BACKGROUND, MIN_GRID_SIZE
from players import Player, KeyPressPlayer, get_player_class, list_variants


logger = logging.getLogger(__name__)

DEATH_REASONS = {
    Collision.WALL: "wall",
    Collision.SNAKE: "self",
}


class SnakeGame:
    """
    Drives one game, one tick per run_round():
      - Applies the accepted direction to the snake
      - Classifies the collision at the new head
      - Grows the snake and places the next apple
      - Ends the game on wall, self, full board or round limit
    """
    def __init__(
        self,
        board: Optional[BoardPolicy] = None,
        snake: Optional[Snake] = None,
        max_rounds: Optional[int] = None,
        prevent_reversal: bool = False,
    ):
        self.board = board if board is not None else BoardPolicy()
        if snake is None:
            # Head in the middle of the board, body trailing to the left
            size = self.board.get_grid_size()
            if size < MIN_GRID_SIZE:
                raise ValueError(
                    f"Grid size {size} is too small for the starting snake; "
                    f"need at least {MIN_GRID_SIZE} or pass a snake."
                )
            centre = size // 2
            snake = Snake(CellItem(Coordinate(centre, centre), HEAD_BACKGROUND))
        self.snake = snake
        self.max_rounds = max_rounds
        self.prevent_reversal = prevent_reversal

        self.direction: Direction = RIGHT
        self.round_number = 0
        self.score = 0
        self.game_over = False
        self.game_result: Optional[str] = None
        self.end_reason: Optional[str] = None

        self.move_history: List[Direction] = []
        self.history: List[GameState] = []

        # Place the first apple
        self.apple = self.board.create_apple(self.free_cells())

    def free_cells(self):
        """Grid cells not occupied by any snake part."""
        return self.board.get_free_cells(self.snake.positions)

    def accept_direction(self, direction: Optional[Direction]) -> Direction:
        """
        Decide the direction for this tick.

        None keeps the current heading. With prevent_reversal, a direction
        straight back into the neck is ignored too.
        """
        if direction is None:
            return self.direction
        if self.prevent_reversal and OPPOSITE_DIRECTIONS[direction] == self.direction:
            logger.debug(f"Ignoring reversal from {self.direction.value} to {direction.value}")
            return self.direction
        self.direction = direction
        return direction

    def run_round(self, direction: Optional[Direction] = None) -> Optional[Collision]:
        """
        Execute one tick:
          1) If game is over, do nothing
          2) Move the snake along the accepted direction
          3) On APPLE: schedule growth, score, place a new apple
          4) On WALL or SNAKE: the snake dies and the game ends
          5) End the game if the round limit is reached
        """
        if self.game_over:
            logger.warning("Game is already over. No more rounds.")
            return None

        move = self.accept_direction(direction)
        self.move_history.append(move)
        self.snake.update(move)

        collision = self.snake.detect_collision(self.board.get_grid_size(), self.apple)
        self.round_number += 1

        if collision == Collision.APPLE:
            self.snake.consume_apple()
            self.score += 1
            free = self.free_cells()
            if free:
                self.apple = self.board.create_apple(free)
            else:
                self.apple = None
                self.end_game("Board is full.", result="won")
        elif collision in DEATH_REASONS:
            self.snake.alive = False
            self.snake.death_reason = DEATH_REASONS[collision]
            self.snake.death_round = self.round_number
            self.end_game(f"Snake hit {collision.value.lower()}.", result="lost")

        if not self.game_over and self.max_rounds is not None and self.round_number >= self.max_rounds:
            self.end_game("Reached max rounds.", result="survived")

        self.record_history()
        logger.debug(f"Finished round {self.round_number}. Score: {self.score}, collision: {collision}")
        return collision

    def play(self, player: Player, realtime: bool = False) -> Dict[str, Any]:
        """
        Run rounds until the game ends, asking player for each direction.

        With realtime, sleeps the board's refresh period between ticks.
        """
        while not self.game_over:
            self.run_round(player.get_move(self.get_current_state()))
            if realtime:
                time.sleep(self.board.get_refresh_rate_ms() / 1000)
        return self.summary()

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            round_number=self.round_number,
            snake_positions=[tuple(pos) for pos in self.snake.positions],
            alive=self.snake.alive,
            score=self.score,
            grid_size=self.board.get_grid_size(),
            apple=tuple(self.apple) if self.apple is not None else None,
            direction=self.direction,
            move_history=list(self.move_history),
            max_rounds=self.max_rounds,
            growing=self.snake.extend_snake,
        )

    def print_board(self):
        """
        Logs a visual representation of the current board state.
        """
        logger.info("\n" + self.get_current_state().print_board() + "\n")

    def end_game(self, reason: str, result: str):
        self.game_over = True
        self.end_reason = reason
        self.game_result = result
        logger.info(f"Game Over: {reason} Score: {self.score}, length: {len(self.snake)}")

    def record_history(self):
        self.history.append(self.get_current_state())

    def summary(self) -> Dict[str, Any]:
        return {
            "rounds": self.round_number,
            "score": self.score,
            "length": len(self.snake),
            "game_result": self.game_result,
            "end_reason": self.end_reason,
            "death_reason": self.snake.death_reason,
        }


# -------------------------------
# Main Entry Point
# -------------------------------
def build_player(variant: str, board: BoardPolicy, keys: Optional[List[str]] = None) -> Player:
    player_class = get_player_class(variant)
    if player_class is KeyPressPlayer:
        return KeyPressPlayer(keys or [], board)
    return player_class(rng=board.rng)


def main(argv: Optional[List[str]] = None):
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Play a headless snake game and print the result."
    )
    parser.add_argument("--player", type=str, default="random", choices=list_variants(),
                        help="Who picks the directions")
    parser.add_argument("--keys", type=str, nargs='*', default=None,
                        help="Key codes for the 'keys' player (e.g. 'KeyW ArrowLeft')")
    parser.add_argument("--grid-size", type=int, default=None,
                        help="Cells per side of the board (default: SNAKE_GRID_SIZE or 10)")
    parser.add_argument("--max-rounds", type=int, default=200,
                        help="Maximum number of rounds")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for apple placement and the random player")
    parser.add_argument("--prevent-reversal", action="store_true",
                        help="Ignore directions straight back into the body")
    parser.add_argument("--realtime", action="store_true",
                        help="Sleep the refresh period between ticks")
    parser.add_argument("--show-board", action="store_true",
                        help="Log the board after the game")
    args = parser.parse_args(argv)

    logging.basicConfig(level=os.getenv("SNAKE_LOG_LEVEL", "INFO").upper())

    board = BoardPolicy.from_env()
    if args.grid_size is not None:
        board = BoardPolicy(args.grid_size, board.get_refresh_rate_ms(), board.rng)
    if args.seed is not None:
        board.rng = random.Random(args.seed)

    game = SnakeGame(
        board=board,
        max_rounds=args.max_rounds,
        prevent_reversal=args.prevent_reversal,
    )
    result = game.play(build_player(args.player, board, args.keys), realtime=args.realtime)

    if args.show_board:
        game.print_board()

    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
