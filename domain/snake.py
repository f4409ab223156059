"""
Snake entity for the game engine.
"""

import logging
from typing import List, Optional, Tuple

from .constants import (
    Collision,
    Direction,
    START_HEAD,
    HEAD_BACKGROUND,
    BODY_BACKGROUND,
)
from .coordinate import CellItem, Coordinate


logger = logging.getLogger(__name__)


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        head: the head CellItem (never part of body)
        body: list of CellItems ordered from closest-to-head to tail
        extend_snake: pending growth, applied on the next update()
        alive: whether this snake is still alive
        death_reason: e.g., 'wall', 'self'
        death_round: The round number when the snake died
    """

    def __init__(
        self,
        head: Optional[CellItem] = None,
        body: Optional[List[CellItem]] = None,
    ):
        if head is None:
            head = CellItem(Coordinate(*START_HEAD), HEAD_BACKGROUND)
        if body is None:
            body = self.create_body(head.coordinate.x - 1, head.coordinate.y)
        if not body:
            raise ValueError("Snake body needs at least one segment.")

        self.head = head
        self.body = list(body)
        self.extend_snake = False
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_round: Optional[int] = None

    @staticmethod
    def create_body(x: int, y: int) -> List[CellItem]:
        """Two starting body segments at (x, y) and (x - 1, y)."""
        return [
            CellItem(Coordinate(x, y), BODY_BACKGROUND),
            CellItem(Coordinate(x - 1, y), BODY_BACKGROUND),
        ]

    def get_snake_head(self) -> CellItem:
        return self.head

    def get_snake_body_parts(self) -> List[CellItem]:
        """Body parts, not including the head."""
        return self.body

    def get_all_snake_parts(self) -> List[CellItem]:
        """Head followed by the body, head to tail."""
        return [self.head] + self.body

    @property
    def positions(self) -> List[Coordinate]:
        """Coordinates from head at index 0 to tail at the end."""
        return [part.coordinate for part in self.get_all_snake_parts()]

    def update(self, direction: Direction) -> None:
        """
        Move the snake one cell in direction.

        The head moves first, then every body part takes the coordinate the
        part ahead of it held before this move. Pending growth appends a new
        tail at the coordinate the old tail vacated. Reversing into the body
        is allowed here; detect_collision() reports it.
        """
        previous = self.head.coordinate
        self.head.coordinate = previous.translate(direction)

        for part in self.body:
            previous, part.coordinate = part.coordinate, previous

        if self.extend_snake:
            self.body.append(CellItem(previous, BODY_BACKGROUND))
            self.extend_snake = False
            logger.info(f"Snake grew to {len(self.body) + 1} parts")

        logger.debug(f"Snake head moved to {tuple(self.head.coordinate)}")

    def detect_collision(
        self,
        grid_size: int,
        apple_location: Optional[Tuple[int, int]],
    ) -> Optional[Collision]:
        """
        Classify the head's current cell.

        Checks, first match wins:
        1. head on the apple -> APPLE
        2. head outside [0, grid_size) on either axis -> WALL
        3. head on a body part -> SNAKE

        Returns None when nothing was hit.
        """
        x, y = self.head.coordinate

        if apple_location is not None and (x, y) == tuple(apple_location):
            return Collision.APPLE

        if x < 0 or x >= grid_size or y < 0 or y >= grid_size:
            return Collision.WALL

        if any(part.coordinate == (x, y) for part in self.body):
            return Collision.SNAKE

        return None

    def consume_apple(self) -> None:
        """Grow by one part on the next update()."""
        self.extend_snake = True

    def update_snake_part_background(
        self,
        snake_part: CellItem,
        index_in_snake: int,
        last_direction: Optional[Direction],
    ) -> str:
        """
        Background to display for a part.

        index_in_snake indexes get_all_snake_parts(). Parts keep their own
        background regardless of position or heading.
        """
        return snake_part.background

    def __len__(self):
        return len(self.body) + 1

    def __repr__(self):
        return f"<Snake head={tuple(self.head.coordinate)}, length={len(self)}, alive={self.alive}>"
