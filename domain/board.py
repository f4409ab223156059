"""
Board policy: grid sizing, tick period, apple placement and input mapping.
"""

import logging
import math
import os
import random
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

from .constants import Direction, KEY_DIRECTIONS, GRID_SIZE, REFRESH_RATE_MS
from .coordinate import Coordinate


logger = logging.getLogger(__name__)


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


class BoardPolicy:
    """
    Rules of the board around the snake.

    The random source is injectable so apple placement can be made
    deterministic (pass a seeded random.Random).
    """

    def __init__(
        self,
        grid_size: int = GRID_SIZE,
        refresh_rate_ms: int = REFRESH_RATE_MS,
        rng: Optional[random.Random] = None,
    ):
        if grid_size < 1:
            raise ValueError(f"Grid size must be positive, got {grid_size}.")
        if refresh_rate_ms < 0:
            raise ValueError(f"Refresh rate must not be negative, got {refresh_rate_ms}.")
        self.grid_size = grid_size
        self.refresh_rate_ms = refresh_rate_ms
        self.rng = rng if rng is not None else random.Random()

    @classmethod
    def from_env(cls) -> "BoardPolicy":
        """
        Build a policy from SNAKE_GRID_SIZE, SNAKE_REFRESH_RATE_MS and SNAKE_SEED.

        Unset variables fall back to the defaults; SNAKE_SEED unset leaves the
        random source unseeded.
        """
        seed = _env_int("SNAKE_SEED", None)
        return cls(
            grid_size=_env_int("SNAKE_GRID_SIZE", GRID_SIZE),
            refresh_rate_ms=_env_int("SNAKE_REFRESH_RATE_MS", REFRESH_RATE_MS),
            rng=random.Random(seed),
        )

    def get_grid_size(self) -> int:
        """Cells per side of the square grid."""
        return self.grid_size

    def get_refresh_rate_ms(self) -> int:
        """Tick period in milliseconds. Smaller numbers make the game faster."""
        return self.refresh_rate_ms

    def get_random_int(self, min_value: float, max_value: float) -> int:
        """Uniform integer from the closed range [ceil(min), ceil(max)]."""
        low = math.ceil(min_value)
        high = math.ceil(max_value)
        if high < low:
            low, high = high, low
        return self.rng.randint(low, high)

    def create_apple(self, free_cells: Sequence[Tuple[int, int]]) -> Coordinate:
        """
        Pick the next apple location from the cells not occupied by the snake.

        The caller is responsible for excluding snake cells. An empty list
        means the board is full, which the caller should treat as game over
        before asking for an apple.
        """
        if not free_cells:
            raise ValueError("Cannot place an apple: no free cells.")
        apple = Coordinate(*free_cells[self.get_random_int(0, len(free_cells) - 1)])
        logger.info(f"Placed apple at {tuple(apple)}")
        return apple

    def get_direction(self, key_event: Union[str, Any]) -> Optional[Direction]:
        """
        Map a keyboard code to a direction.

        Accepts either the code string (e.g. "KeyW", "ArrowUp") or an event
        object with a `code` attribute. Unrecognized codes, and anything that
        is not a string code, return None.
        """
        code = getattr(key_event, "code", key_event)
        if not isinstance(code, str):
            return None
        return KEY_DIRECTIONS.get(code)

    def get_free_cells(self, occupied: Iterable[Tuple[int, int]]) -> List[Coordinate]:
        """Every in-grid cell not in occupied, row by row from (0, 0)."""
        taken = {tuple(cell) for cell in occupied}
        return [
            Coordinate(x, y)
            for y in range(self.grid_size)
            for x in range(self.grid_size)
            if (x, y) not in taken
        ]
