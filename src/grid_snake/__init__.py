"""Grid snake — deterministic rule engine for a grid-based snake game."""

from grid_snake.board import Board, Entity
from grid_snake.config import GameConfig
from grid_snake.game import Game, TickOutcome, TickResult
from grid_snake.snake import (
    Direction,
    Edge,
    HitWall,
    Snake,
    Step,
    resolve_direction,
)

__all__ = [
    "Board",
    "Direction",
    "Edge",
    "Entity",
    "Game",
    "GameConfig",
    "HitWall",
    "Snake",
    "Step",
    "TickOutcome",
    "TickResult",
    "resolve_direction",
]
