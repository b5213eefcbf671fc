"""In-memory registry of running games."""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from dataclasses import dataclass, field

from grid_snake.config import GameConfig
from grid_snake.game import Game, TickResult
from grid_snake.server.models import GameSummary
from grid_snake.snake import Direction

logger = logging.getLogger(__name__)

_MAX_SESSIONS = 1000


@dataclass
class GameSession:
    """A game plus the lock that serializes ticks against it."""

    game_id: str
    game: Game
    created_at: float = field(default_factory=time.monotonic)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    def summary(self) -> GameSummary:
        return GameSummary(
            game_id=self.game_id,
            width=self.game.width,
            height=self.game.height,
            speed=self.game.speed,
            score=self.game.score,
            direction=self.game.direction.name.lower(),
            ticks=self.game.ticks,
        )

    async def tick(self, direction: Direction | None) -> TickResult:
        """Run one tick while holding the session lock."""
        async with self.lock:
            return self.game.tick(direction)


class SessionManager:
    """Central registry managing all game sessions."""

    def __init__(self, max_sessions: int = _MAX_SESSIONS) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1.")
        self._sessions: dict[str, GameSession] = {}
        self._max_sessions = max_sessions

    def __len__(self) -> int:
        return len(self._sessions)

    def create_session(
        self,
        config: GameConfig,
        direction: Direction = Direction.RIGHT,
    ) -> GameSession:
        """Create a new game and register it under a fresh id.

        When the registry is full the oldest sessions are dropped first.
        """
        self._prune_oldest_sessions(self._max_sessions - 1)

        game = Game.from_config(config, direction=direction)
        game_id = uuid.uuid4().hex[:12]
        session = GameSession(game_id=game_id, game=game)
        self._sessions[game_id] = session
        logger.info(
            "Game %s created (%dx%d, speed=%d).",
            game_id, game.width, game.height, game.speed,
        )
        return session

    def _prune_oldest_sessions(self, keep: int) -> None:
        """Drop the oldest sessions so that at most *keep* remain."""
        overflow = len(self._sessions) - keep
        if overflow <= 0:
            return

        oldest = sorted(self._sessions.values(), key=lambda s: s.created_at)
        for stale in oldest[:overflow]:
            self._sessions.pop(stale.game_id, None)
        logger.info(
            "Evicted %d oldest game(s) (retaining up to %d).",
            overflow,
            self._max_sessions,
        )

    def get_session(self, game_id: str) -> GameSession:
        session = self._sessions.get(game_id)
        if session is None:
            raise KeyError(f"Game {game_id} not found.")
        return session

    def list_sessions(self) -> list[GameSummary]:
        return [s.summary() for s in self._sessions.values()]

    def remove_session(self, game_id: str) -> None:
        if self._sessions.pop(game_id, None) is None:
            raise KeyError(f"Game {game_id} not found.")
        logger.info("Game %s removed.", game_id)

    def cleanup(self) -> None:
        """Drop every session."""
        count = len(self._sessions)
        self._sessions.clear()
        if count:
            logger.info("Discarded %d game session(s).", count)
