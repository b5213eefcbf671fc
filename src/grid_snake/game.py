"""Tick-based game composing the board and the snake."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from grid_snake.board import Board, Entity
from grid_snake.config import (
    DEFAULT_SNAKE_LENGTH,
    DEFAULT_SPEED,
    GameConfig,
)
from grid_snake.snake import Direction, Edge, HitWall, Snake

logger = logging.getLogger(__name__)


class TickOutcome(str, enum.Enum):
    """What happened during a single tick."""

    MOVED = "moved"
    HIT_WALL = "hit_wall"


@dataclass(frozen=True)
class TickResult:
    """Outcome of :meth:`Game.tick`.

    ``direction`` is the effective direction after the reversal guard;
    ``head`` is the snake's head once the tick is over; ``edge`` is set
    only for blocked ticks.
    """

    outcome: TickOutcome
    direction: Direction
    head: tuple[int, int]
    edge: Edge | None = None

    @property
    def moved(self) -> bool:
        return self.outcome is TickOutcome.MOVED

    def to_dict(self) -> dict:
        return {
            "outcome": self.outcome.value,
            "direction": self.direction.name.lower(),
            "head": list(self.head),
            "edge": self.edge.value if self.edge is not None else None,
        }


class Game:
    """Single-snake, tick-based game.

    The game owns the board and the snake. Construction never rejects its
    arguments: out-of-range dimensions, speed and snake length fall back
    to defaults, and the starting direction is always ``RIGHT``.

    Each call to :meth:`tick` either commits one move or leaves the board,
    the snake and the stored direction exactly as they were.
    """

    def __init__(
        self,
        width: int,
        height: int,
        speed: int = DEFAULT_SPEED,
        initial_length: int = DEFAULT_SNAKE_LENGTH,
        direction: Direction = Direction.RIGHT,
        *,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> None:
        config = GameConfig(
            width=width,
            height=height,
            speed=speed,
            initial_length=initial_length,
            seed=seed,
        ).resolved()
        self.width = config.width
        self.height = config.height
        self.speed = config.speed
        self.score = 0
        self.ticks = 0

        if direction is not Direction.RIGHT:
            logger.debug(
                "Initial direction %s overridden to RIGHT.", direction.name,
            )
        self.direction = Direction.RIGHT

        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.board = Board(self.width, self.height, rng=self.rng)

        self.snake = Snake.horizontal(
            self.width // 2 + 1, self.height // 2, config.initial_length,
        )
        for col, row in self.snake:
            self.board.set_entity(col, row, Entity.SNAKE)

        self.board.place_food()

    @classmethod
    def from_config(
        cls,
        config: GameConfig,
        rng: np.random.Generator | None = None,
        direction: Direction = Direction.RIGHT,
    ) -> Game:
        """Build a game from a :class:`GameConfig`."""
        return cls(
            config.width,
            config.height,
            config.speed,
            config.initial_length,
            direction,
            rng=rng,
            seed=config.seed,
        )

    def tick(self, direction: Direction | None = None) -> TickResult:
        """Advance the game by one tick.

        With no *direction* the snake keeps its last committed direction.
        """
        result = self.snake.move(self.direction, direction)
        if isinstance(result, HitWall):
            return self._blocked(result.edge, result.direction)

        col, row = result.new_head
        if self.board.get_index(col, row) is None:
            # Past the right or bottom edge: put the body back.
            self.snake.rollback(result)
            edge = Edge.RIGHT if col >= self.width else Edge.BOTTOM
            return self._blocked(edge, result.direction)

        if self.board.entity_at(col, row) == Entity.FOOD:
            logger.debug("Snake passed over food at %s.", result.new_head)

        self.board.set_entity(*result.vacated_tail, Entity.EMPTY)
        self.board.set_entity(col, row, Entity.SNAKE)
        self.direction = result.direction
        self.ticks += 1
        return TickResult(TickOutcome.MOVED, result.direction, result.new_head)

    def entity_at(self, col: int, row: int) -> Entity | None:
        return self.board.entity_at(col, row)

    def get_index(self, col: int, row: int) -> int | None:
        return self.board.get_index(col, row)

    def food_position(self) -> tuple[int, int] | None:
        return self.board.food_position()

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        food = self.board.food_position()
        return {
            "width": self.width,
            "height": self.height,
            "speed": self.speed,
            "score": self.score,
            "ticks": self.ticks,
            "direction": self.direction.name.lower(),
            "snake": self.snake.to_dict(),
            "food": list(food) if food is not None else None,
            "board": self.board.to_dict(),
        }

    def _blocked(self, edge: Edge, direction: Direction) -> TickResult:
        logger.info(
            "Tick blocked: moving %s hits the %s edge at %s.",
            direction.name, edge.value, self.snake.head,
        )
        return TickResult(TickOutcome.HIT_WALL, direction, self.snake.head, edge)
