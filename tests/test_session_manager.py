"""Tests for the in-memory session registry."""

import logging

import pytest

from grid_snake.config import GameConfig
from grid_snake.game import TickOutcome
from grid_snake.server.session_manager import SessionManager
from grid_snake.snake import Direction


class TestSessionManager:
    def test_create_and_get(self):
        manager = SessionManager()
        session = manager.create_session(GameConfig(width=10, height=10, seed=0))
        assert manager.get_session(session.game_id) is session
        assert len(manager) == 1

    def test_summary(self):
        manager = SessionManager()
        session = manager.create_session(GameConfig(width=5, height=5, seed=0))
        summary = session.summary()
        assert summary.width == 17
        assert summary.direction == "right"
        assert summary.ticks == 0

    def test_unknown_session(self):
        with pytest.raises(KeyError):
            SessionManager().get_session("missing")

    def test_remove(self):
        manager = SessionManager()
        session = manager.create_session(GameConfig(seed=0))
        manager.remove_session(session.game_id)
        assert len(manager) == 0
        with pytest.raises(KeyError):
            manager.remove_session(session.game_id)

    def test_capacity_evicts_oldest(self):
        manager = SessionManager(max_sessions=2)
        first = manager.create_session(GameConfig(seed=0))
        second = manager.create_session(GameConfig(seed=0))
        second.created_at = first.created_at + 1.0
        third = manager.create_session(GameConfig(seed=0))
        assert len(manager) == 2
        with pytest.raises(KeyError):
            manager.get_session(first.game_id)
        assert manager.get_session(second.game_id) is second
        assert manager.get_session(third.game_id) is third

    def test_eviction_uses_creation_time(self):
        manager = SessionManager(max_sessions=2)
        first = manager.create_session(GameConfig(seed=0))
        second = manager.create_session(GameConfig(seed=0))
        first.created_at = second.created_at + 1.0
        manager.create_session(GameConfig(seed=0))
        assert manager.get_session(first.game_id) is first
        with pytest.raises(KeyError):
            manager.get_session(second.game_id)

    def test_starting_direction_forwarded_and_overridden(self, caplog):
        manager = SessionManager()
        with caplog.at_level(logging.DEBUG, logger="grid_snake.game"):
            session = manager.create_session(
                GameConfig(width=10, height=10, seed=0), Direction.UP,
            )
        assert session.game.direction is Direction.RIGHT
        assert "overridden to RIGHT" in caplog.text

    def test_invalid_capacity(self):
        with pytest.raises(ValueError, match="at least 1"):
            SessionManager(max_sessions=0)

    def test_cleanup(self):
        manager = SessionManager()
        manager.create_session(GameConfig(seed=0))
        manager.cleanup()
        assert manager.list_sessions() == []

    @pytest.mark.asyncio
    async def test_tick_under_lock(self):
        manager = SessionManager()
        session = manager.create_session(GameConfig(width=10, height=10, seed=0))
        result = await session.tick(Direction.DOWN)
        assert result.outcome is TickOutcome.MOVED
        assert not session.lock.locked()
        assert session.game.snake.head == (6, 6)
