"""Tests for the Snake module."""

import pytest

from grid_snake.snake import (
    Direction,
    Edge,
    HitWall,
    Snake,
    Step,
    resolve_direction,
)


class TestDirection:
    def test_deltas(self):
        assert Direction.UP.value == (0, -1)
        assert Direction.DOWN.value == (0, 1)
        assert Direction.LEFT.value == (-1, 0)
        assert Direction.RIGHT.value == (1, 0)

    def test_opposites(self):
        assert Direction.UP.opposite is Direction.DOWN
        assert Direction.LEFT.opposite is Direction.RIGHT

    def test_parse(self):
        assert Direction.parse("up") is Direction.UP
        assert Direction.parse(" Left ") is Direction.LEFT

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown direction"):
            Direction.parse("sideways")


class TestResolveDirection:
    def test_reversal_ignored(self):
        assert resolve_direction(Direction.RIGHT, Direction.LEFT) is Direction.RIGHT
        assert resolve_direction(Direction.UP, Direction.DOWN) is Direction.UP

    def test_turn_accepted(self):
        assert resolve_direction(Direction.RIGHT, Direction.UP) is Direction.UP

    def test_none_keeps_current(self):
        assert resolve_direction(Direction.DOWN, None) is Direction.DOWN


class TestSnakeInit:
    def test_horizontal(self):
        snake = Snake.horizontal(6, 5, 3)
        assert list(snake) == [(6, 5), (5, 5), (4, 5)]
        assert snake.head == (6, 5)
        assert snake.tail == (4, 5)
        assert len(snake) == 3

    def test_minimum_length(self):
        with pytest.raises(ValueError, match="at least 1"):
            Snake([])

    def test_occupies(self):
        snake = Snake.horizontal(6, 5, 3)
        assert snake.occupies(5, 5)
        assert not snake.occupies(0, 0)


class TestSnakeMove:
    def test_move_drops_tail(self):
        snake = Snake.horizontal(6, 5, 3)
        step = snake.move(Direction.RIGHT, None)
        assert step == Step((7, 5), (4, 5), Direction.RIGHT)
        assert list(snake) == [(7, 5), (6, 5), (5, 5)]

    def test_turn_up(self):
        snake = Snake.horizontal(6, 5, 3)
        step = snake.move(Direction.RIGHT, Direction.UP)
        assert isinstance(step, Step)
        assert step.new_head == (6, 4)
        assert step.direction is Direction.UP

    def test_reversal_same_as_straight(self):
        a = Snake.horizontal(6, 5, 3)
        b = Snake.horizontal(6, 5, 3)
        assert a.move(Direction.RIGHT, Direction.LEFT) == b.move(
            Direction.RIGHT, Direction.RIGHT,
        )
        assert list(a) == list(b)

    def test_hit_top_wall(self):
        snake = Snake([(0, 0)])
        result = snake.move(Direction.UP, Direction.UP)
        assert result == HitWall(Edge.TOP, Direction.UP)
        assert list(snake) == [(0, 0)]

    def test_hit_left_wall(self):
        snake = Snake([(0, 0)])
        result = snake.move(Direction.LEFT, None)
        assert result == HitWall(Edge.LEFT, Direction.LEFT)
        assert list(snake) == [(0, 0)]

    def test_far_edges_not_checked(self):
        snake = Snake([(49, 49)])
        result = snake.move(Direction.RIGHT, None)
        assert isinstance(result, Step)
        assert result.new_head == (50, 49)

    def test_single_segment_vacates_own_cell(self):
        snake = Snake([(3, 3)])
        step = snake.move(Direction.DOWN, None)
        assert step.vacated_tail == (3, 3)
        assert list(snake) == [(3, 4)]


class TestSnakeRollback:
    def test_rollback_restores_body(self):
        snake = Snake.horizontal(6, 5, 3)
        before = list(snake)
        step = snake.move(Direction.RIGHT, Direction.DOWN)
        snake.rollback(step)
        assert list(snake) == before

    def test_rollback_mismatch(self):
        snake = Snake.horizontal(6, 5, 3)
        with pytest.raises(ValueError, match="does not match"):
            snake.rollback(Step((0, 0), (1, 1), Direction.UP))


class TestSnakeEat:
    def test_eat_not_implemented(self):
        with pytest.raises(NotImplementedError):
            Snake([(1, 1)]).eat()


class TestSnakeSerialization:
    def test_to_dict(self):
        snake = Snake.horizontal(5, 5, 2)
        d = snake.to_dict()
        assert d["body"] == [[5, 5], [4, 5]]
        assert d["length"] == 2
