"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from grid_snake.config import (
    DEFAULT_HEIGHT,
    DEFAULT_SNAKE_LENGTH,
    DEFAULT_SPEED,
    DEFAULT_WIDTH,
)


class CreateGameRequest(BaseModel):
    """Request body for POST /games.

    Numbers outside the supported ranges are clamped by the engine.
    """

    width: int = Field(default=DEFAULT_WIDTH, ge=0, le=255)
    height: int = Field(default=DEFAULT_HEIGHT, ge=0, le=255)
    speed: int = Field(default=DEFAULT_SPEED, ge=0, le=255)
    initial_length: int = Field(default=DEFAULT_SNAKE_LENGTH, ge=0, le=255)
    direction: str = "right"
    seed: int | None = None


class TickRequest(BaseModel):
    """Request body for POST /games/{game_id}/tick."""

    direction: str | None = None


class GameSummary(BaseModel):
    """Compact game info for list endpoints."""

    game_id: str
    width: int
    height: int
    speed: int
    score: int
    direction: str
    ticks: int


class TickResponse(BaseModel):
    """Result of one tick."""

    outcome: str
    direction: str
    head: list[int]
    edge: str | None = None


class CellResponse(BaseModel):
    """Entity lookup for a single cell."""

    col: int
    row: int
    entity: str | None = None
