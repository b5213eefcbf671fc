"""Snake body and the movement transform."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


class Direction(enum.Enum):
    """Cardinal movement directions with (col_delta, row_delta) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, name: str) -> Direction:
        """Look up a direction by case-insensitive name."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}.") from None


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Edge(enum.Enum):
    """Board edge a blocked move ran into."""

    TOP = "top"
    LEFT = "left"
    RIGHT = "right"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Step:
    """A move that was applied to the snake body."""

    new_head: tuple[int, int]
    vacated_tail: tuple[int, int]
    direction: Direction


@dataclass(frozen=True)
class HitWall:
    """A move refused because it would leave the board."""

    edge: Edge
    direction: Direction


def resolve_direction(
    current: Direction, requested: Direction | None,
) -> Direction:
    """Return the direction to apply, ignoring 180° reversals."""
    if requested is None or requested is current.opposite:
        return current
    return requested


class Snake:
    """A snake represented as an ordered deque of (col, row) segments.

    The head is ``body[0]``; the tail is ``body[-1]``. The snake knows
    nothing about the board size, so only moves past column or row zero
    are refused here. Moves past the far edges are caught by the game.
    """

    def __init__(self, body: Iterable[tuple[int, int]]) -> None:
        self.body: deque[tuple[int, int]] = deque(body)
        if not self.body:
            raise ValueError("Snake length must be at least 1.")

    @classmethod
    def horizontal(cls, head_col: int, row: int, length: int) -> Snake:
        """Build a snake lying along *row*, head on the right."""
        return cls((head_col - i, row) for i in range(length))

    @property
    def head(self) -> tuple[int, int]:
        return self.body[0]

    @property
    def tail(self) -> tuple[int, int]:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self.body)

    def occupies(self, col: int, row: int) -> bool:
        return (col, row) in self.body

    def move(
        self, current: Direction, requested: Direction | None,
    ) -> Step | HitWall:
        """Advance one cell, dropping the tail.

        Returns a :class:`HitWall` and leaves the body untouched when the
        head would go above row 0 or left of column 0.
        """
        effective = resolve_direction(current, requested)
        dc, dr = effective.value
        col, row = self.head
        new_col, new_row = col + dc, row + dr
        if new_row < 0:
            return HitWall(Edge.TOP, effective)
        if new_col < 0:
            return HitWall(Edge.LEFT, effective)

        vacated = self.body.pop()
        self.body.appendleft((new_col, new_row))
        return Step((new_col, new_row), vacated, effective)

    def rollback(self, step: Step) -> None:
        """Undo the most recent successful :meth:`move`."""
        if self.head != step.new_head:
            raise ValueError("Step does not match the current head.")
        self.body.popleft()
        self.body.append(step.vacated_tail)

    def eat(self) -> None:
        """Grow by keeping the tail on the next move.

        Food consumption is not part of the rules yet; growth and scoring
        have to be designed together before this can be filled in.
        """
        raise NotImplementedError("Snake growth is not implemented.")

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "length": len(self.body),
        }
