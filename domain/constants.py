"""
Game constants for the snake rules engine.
"""

from enum import Enum


class Direction(str, Enum):
    """Movement directions. (0, 0) is the bottom-left cell, so UP is y + 1."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"


class Collision(str, Enum):
    """Outcome of a collision check, in priority order."""

    APPLE = "APPLE"
    WALL = "WALL"
    SNAKE = "SNAKE"


# Movement directions
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

DIRECTION_DELTAS = {
    UP: (0, 1),      # Up => y + 1
    DOWN: (0, -1),   # Down => y - 1
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITE_DIRECTIONS = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Keyboard event codes accepted as input
KEY_DIRECTIONS = {
    "KeyW": UP,
    "ArrowUp": UP,
    "KeyA": LEFT,
    "ArrowLeft": LEFT,
    "KeyS": DOWN,
    "ArrowDown": DOWN,
    "KeyD": RIGHT,
    "ArrowRight": RIGHT,
}

# Board settings
GRID_SIZE = 10
REFRESH_RATE_MS = 500

# Starting snake
START_HEAD = (5, 5)
# Smallest board that fits the starting snake centred on it
MIN_GRID_SIZE = 4
HEAD_BACKGROUND = "yellow"
BODY_BACKGROUND = "green"
APPLE_BACKGROUND = "./game-assets/apple.png"
