"""
Tests for domain/snake.py - snake movement, growth and collision rules.
"""

import pytest
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import Snake, CellItem, Coordinate, Collision, UP, DOWN, LEFT, RIGHT


def make_snake(head, *body):
    return Snake(
        CellItem(Coordinate(*head), "yellow"),
        [CellItem(Coordinate(*part), "green") for part in body],
    )


class TestCoordinate:
    """Tests for the Coordinate and CellItem value types."""

    def test_coordinate_equals_plain_tuple(self):
        """Coordinates compare equal to (x, y) tuples."""
        assert Coordinate(3, 4) == (3, 4)

    def test_translate_returns_new_value(self):
        """translate() leaves the original coordinate untouched."""
        start = Coordinate(3, 4)
        moved = start.translate(UP)
        assert moved == (3, 5)
        assert start == (3, 4)

    def test_translate_invalid_direction_raises(self):
        """translate() rejects values outside the four directions."""
        with pytest.raises(ValueError):
            Coordinate(0, 0).translate("NORTH")

    def test_cell_item_coerces_tuple(self):
        """CellItem stores its coordinate as a Coordinate."""
        item = CellItem((1, 2), "green")
        assert isinstance(item.coordinate, Coordinate)
        assert item.coordinate.x == 1
        assert item.background == "green"


class TestSnakeInitialization:
    """Tests for the starting snake."""

    def test_default_snake(self):
        """Default snake has a yellow head at (5, 5) and two green body parts."""
        snake = Snake()
        assert snake.get_snake_head().coordinate == (5, 5)
        assert snake.get_snake_head().background == "yellow"
        assert [p.coordinate for p in snake.get_snake_body_parts()] == [(4, 5), (3, 5)]
        assert all(p.background == "green" for p in snake.get_snake_body_parts())
        assert snake.extend_snake is False
        assert snake.alive is True
        assert snake.death_reason is None

    def test_empty_body_raises(self):
        """A snake needs at least one body part."""
        with pytest.raises(ValueError):
            Snake(CellItem(Coordinate(5, 5), "yellow"), [])

    def test_create_body(self):
        """create_body() builds two parts trailing to the left."""
        body = Snake.create_body(2, 7)
        assert [p.coordinate for p in body] == [(2, 7), (1, 7)]

    def test_all_parts_head_first(self):
        """get_all_snake_parts() is head followed by body, head to tail."""
        snake = Snake()
        parts = snake.get_all_snake_parts()
        assert parts[0] is snake.get_snake_head()
        assert parts[1:] == snake.get_snake_body_parts()
        assert snake.positions == [(5, 5), (4, 5), (3, 5)]
        assert len(snake) == 3

    def test_head_not_in_body(self):
        """The head is never part of the body list."""
        snake = Snake()
        assert snake.get_snake_head() not in snake.get_snake_body_parts()


class TestSnakeUpdate:
    """Tests for Snake.update()."""

    @pytest.mark.parametrize("direction,expected", [
        (UP, (5, 6)),
        (DOWN, (5, 4)),
        (LEFT, (4, 5)),
        (RIGHT, (6, 5)),
    ])
    def test_head_moves_one_unit(self, direction, expected):
        """The head moves exactly one cell along the direction."""
        snake = Snake()
        snake.update(direction)
        assert snake.get_snake_head().coordinate == expected

    def test_body_follows_chain(self):
        """Each body part takes the old coordinate of the part ahead of it."""
        snake = make_snake((5, 5), (4, 5), (4, 4), (3, 4))
        before = snake.positions
        snake.update(UP)
        assert [p.coordinate for p in snake.get_snake_body_parts()] == before[:-1]

    def test_tail_dropped_without_growth(self):
        """Without pending growth the old tail cell is vacated."""
        snake = Snake()
        snake.update(UP)
        assert len(snake.get_snake_body_parts()) == 2
        assert (3, 5) not in snake.positions
        assert len(set(snake.positions)) == len(snake.positions)

    def test_captured_coordinate_not_aliased(self):
        """A coordinate read before a move keeps its value afterwards."""
        snake = Snake()
        head_before = snake.get_snake_head().coordinate
        snake.update(RIGHT)
        assert head_before == (5, 5)
        assert snake.get_snake_body_parts()[0].coordinate == (5, 5)

    def test_invalid_direction_raises(self):
        """update() rejects values outside the four directions and does not move."""
        snake = Snake()
        with pytest.raises(ValueError):
            snake.update("NORTH")
        assert snake.positions == [(5, 5), (4, 5), (3, 5)]

    def test_reversal_is_not_prevented(self):
        """Moving straight back is allowed; the collision is reported instead."""
        snake = Snake()
        snake.update(LEFT)
        assert snake.get_snake_head().coordinate == (4, 5)
        assert snake.detect_collision(10, (0, 0)) == Collision.SNAKE


class TestSnakeGrowth:
    """Tests for consume_apple() and delayed growth."""

    def test_consume_apple_sets_pending_growth(self):
        """consume_apple() only sets the flag; length is unchanged."""
        snake = Snake()
        snake.consume_apple()
        assert snake.extend_snake is True
        assert len(snake) == 3

    def test_growth_on_next_update(self):
        """The next update appends one part at the former tail position."""
        snake = Snake()
        snake.consume_apple()
        snake.update(RIGHT)

        body = snake.get_snake_body_parts()
        assert len(body) == 3
        assert body[-1].coordinate == (3, 5)
        assert body[-1].background == "green"
        assert snake.extend_snake is False
        assert snake.positions == [(6, 5), (5, 5), (4, 5), (3, 5)]

    def test_growth_only_once(self):
        """A second update without another apple does not grow further."""
        snake = Snake()
        snake.consume_apple()
        snake.update(RIGHT)
        snake.update(RIGHT)
        assert len(snake.get_snake_body_parts()) == 3
        assert snake.positions == [(7, 5), (6, 5), (5, 5), (4, 5)]


class TestDetectCollision:
    """Tests for Snake.detect_collision()."""

    def test_apple(self):
        """Head on the apple is an APPLE collision."""
        snake = Snake()
        assert snake.detect_collision(10, (5, 5)) == Collision.APPLE

    def test_apple_beats_snake(self):
        """Head on both the apple and a body part counts as APPLE."""
        snake = make_snake((2, 2), (2, 2), (2, 3))
        assert snake.detect_collision(10, (2, 2)) == Collision.APPLE
        assert snake.detect_collision(10, (0, 0)) == Collision.SNAKE

    @pytest.mark.parametrize("head", [(10, 5), (-1, 5), (5, 10), (5, -1)])
    def test_wall(self, head):
        """Head outside [0, grid_size) on either axis is a WALL collision."""
        snake = make_snake(head, (4, 4))
        assert snake.detect_collision(10, (0, 0)) == Collision.WALL

    @pytest.mark.parametrize("head", [(9, 9), (0, 0)])
    def test_corners_are_inside(self, head):
        """The grid corners are not walls."""
        snake = make_snake(head, (4, 4))
        assert snake.detect_collision(10, None) is None

    def test_wall_beats_snake(self):
        """An out-of-bounds head is reported as WALL even if a part shares it."""
        snake = make_snake((10, 5), (10, 5))
        assert snake.detect_collision(10, (0, 0)) == Collision.WALL

    def test_no_collision(self):
        """An empty in-grid cell is no collision."""
        snake = Snake()
        assert snake.detect_collision(10, (0, 0)) is None

    def test_does_not_mutate(self):
        """detect_collision() is read-only."""
        snake = Snake()
        snake.detect_collision(10, (5, 5))
        assert snake.positions == [(5, 5), (4, 5), (3, 5)]
        assert snake.extend_snake is False


class TestPartBackground:
    """Tests for update_snake_part_background()."""

    def test_returns_part_background(self):
        """Each part keeps its own background."""
        snake = Snake()
        parts = snake.get_all_snake_parts()
        assert snake.update_snake_part_background(parts[0], 0, RIGHT) == "yellow"
        assert snake.update_snake_part_background(parts[2], 2, None) == "green"
