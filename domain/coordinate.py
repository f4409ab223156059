"""
Grid value types: Coordinate and CellItem.
"""

from dataclasses import dataclass
from typing import NamedTuple

from .constants import Direction, DIRECTION_DELTAS


class Coordinate(NamedTuple):
    """
    An (x, y) cell on the grid.

    Coordinates are immutable values with no bounds of their own; walls are
    enforced by collision detection. They compare equal to plain tuples.
    """

    x: int
    y: int

    def translate(self, direction: Direction) -> "Coordinate":
        """Return the neighbouring coordinate one unit along direction."""
        try:
            dx, dy = DIRECTION_DELTAS[direction]
        except KeyError:
            raise ValueError(f"Invalid direction: {direction!r}") from None
        return Coordinate(self.x + dx, self.y + dy)


@dataclass
class CellItem:
    """
    A displayable cell: a coordinate plus an opaque background tag.

    The background is a colour name or an asset path and is only read by
    presentation code.
    """

    coordinate: Coordinate
    background: str

    def __post_init__(self):
        self.coordinate = Coordinate(*self.coordinate)
