"""WebSocket handler driving a game one tick per message."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from grid_snake.server.session_manager import SessionManager
from grid_snake.snake import Direction

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_manager(ws: WebSocket) -> SessionManager:
    return ws.app.state.session_manager


def _dumps(payload: dict) -> str:
    return json.dumps(payload, separators=(",", ":"))


@ws_router.websocket("/games/{game_id}/play")
async def play(websocket: WebSocket, game_id: str) -> None:
    """Player WebSocket: each message runs one tick and gets the new state.

    Messages look like ``{"direction": "up"}``; a missing or ``null``
    direction keeps the current heading. Anything else is ignored.
    """
    manager = _get_manager(websocket)
    try:
        session = manager.get_session(game_id)
    except KeyError:
        await websocket.close(code=4004, reason="Game not found.")
        return

    await websocket.accept()
    logger.info("Client connected to game %s.", game_id)
    await websocket.send_text(_dumps({"state": session.game.get_state()}))

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue

            direction_str = msg.get("direction")
            if direction_str is None:
                direction = None
            elif isinstance(direction_str, str):
                try:
                    direction = Direction.parse(direction_str)
                except ValueError:
                    continue
            else:
                continue

            result = await session.tick(direction)
            await websocket.send_text(_dumps({
                "result": result.to_dict(),
                "state": session.game.get_state(),
            }))
    except WebSocketDisconnect:
        logger.info("Client disconnected from game %s.", game_id)
