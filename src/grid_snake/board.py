"""Flat grid of cell states for the snake game."""

from __future__ import annotations

import enum
import logging

import numpy as np

logger = logging.getLogger(__name__)


class Entity(enum.IntEnum):
    """Integer codes stored in the board array."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2


class Board:
    """NumPy-backed board stored as a single row-major sequence of cells.

    Positions are ``(col, row)`` pairs and map to the linear index
    ``row * width + col``. Out-of-bounds lookups return ``None`` rather than
    raising, so callers can probe candidate positions freely.

    Food placement draws from an injected ``numpy.random.Generator`` so
    tests can substitute a seeded one.
    """

    def __init__(
        self,
        width: int,
        height: int,
        rng: np.random.Generator | None = None,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError("Board dimensions must be positive.")
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else np.random.default_rng()
        self.cells = np.zeros(width * height, dtype=np.int8)

    def clear(self) -> None:
        """Reset all cells to empty."""
        self.cells[:] = Entity.EMPTY

    def get_index(self, col: int, row: int) -> int | None:
        """Return the linear index of a position, or ``None`` if outside."""
        if 0 <= col < self.width and 0 <= row < self.height:
            return row * self.width + col
        return None

    def position_of(self, index: int) -> tuple[int, int]:
        """Return the ``(col, row)`` position of a linear index."""
        if not 0 <= index < self.cells.size:
            raise IndexError(f"Cell index {index} out of range.")
        row, col = divmod(index, self.width)
        return col, row

    def entity_at(self, col: int, row: int) -> Entity | None:
        """Return the entity at a position, or ``None`` if outside."""
        idx = self.get_index(col, row)
        if idx is None:
            return None
        return Entity(self.cells[idx])

    def set_entity(self, col: int, row: int, entity: Entity) -> None:
        """Overwrite the entity at a position."""
        idx = self.get_index(col, row)
        if idx is None:
            raise IndexError(f"Position ({col}, {row}) is off the board.")
        self.cells[idx] = entity

    def empty_indices(self) -> list[int]:
        """Return the linear indices of all empty cells."""
        return np.flatnonzero(self.cells == Entity.EMPTY).tolist()

    def count(self, entity: Entity) -> int:
        """Return how many cells hold *entity*."""
        return int(np.count_nonzero(self.cells == entity))

    def place_food(self) -> tuple[int, int] | None:
        """Put food on a uniformly chosen empty cell.

        Returns the chosen position, or ``None`` when no cell is empty.
        """
        empty = self.empty_indices()
        if not empty:
            logger.warning("No empty cells available for food placement.")
            return None

        idx = empty[int(self.rng.integers(len(empty)))]
        self.cells[idx] = Entity.FOOD
        pos = self.position_of(idx)
        logger.debug("Food placed at %s.", pos)
        return pos

    def food_position(self) -> tuple[int, int] | None:
        """Return the first food cell in row-major order, if any."""
        found = np.flatnonzero(self.cells == Entity.FOOD)
        if found.size == 0:
            return None
        return self.position_of(int(found[0]))

    def to_dict(self) -> dict:
        """Serialize board state to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "cells": self.cells.reshape(self.height, self.width).tolist(),
        }
