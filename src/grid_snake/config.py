"""Game construction parameters and their clamping rules."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, replace
from pathlib import Path

logger = logging.getLogger(__name__)

MIN_DIMENSION = 10
MAX_DIMENSION = 50
DEFAULT_WIDTH = 17
DEFAULT_HEIGHT = 15

MIN_SPEED = 1
MAX_SPEED = 100
DEFAULT_SPEED = 10

DEFAULT_SNAKE_LENGTH = 3


def clamp_dimension(value: int, default: int) -> int:
    """Return *value* if it is a supported board dimension, else *default*."""
    if MIN_DIMENSION <= value <= MAX_DIMENSION:
        return value
    return default


def clamp_speed(value: int) -> int:
    """Return *value* if it is a supported speed, else the default speed."""
    if MIN_SPEED <= value <= MAX_SPEED:
        return value
    return DEFAULT_SPEED


def clamp_snake_length(length: int, width: int) -> int:
    """Return a starting length that fits a board of *width* columns.

    The head starts one column right of centre and the body extends to the
    left, so at most ``width // 2 + 2`` segments fit.
    """
    if length < 1 or length >= width - 3 or length > width // 2 + 2:
        return DEFAULT_SNAKE_LENGTH
    return length


@dataclass(frozen=True)
class GameConfig:
    """Parameters for creating a game.

    Values are stored as given; :meth:`resolved` applies the clamping
    rules. Supports JSON serialization for reuse from the command line.
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    speed: int = DEFAULT_SPEED
    initial_length: int = DEFAULT_SNAKE_LENGTH
    seed: int | None = None

    def resolved(self) -> GameConfig:
        """Return a copy with every value clamped into its supported range."""
        width = clamp_dimension(self.width, DEFAULT_WIDTH)
        height = clamp_dimension(self.height, DEFAULT_HEIGHT)
        return replace(
            self,
            width=width,
            height=height,
            speed=clamp_speed(self.speed),
            initial_length=clamp_snake_length(self.initial_length, width),
        )

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
