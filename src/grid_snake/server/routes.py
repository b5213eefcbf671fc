"""REST API route handlers for game creation, ticking and lookups."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, Response

from grid_snake.config import GameConfig
from grid_snake.server.models import (
    CellResponse,
    CreateGameRequest,
    GameSummary,
    TickRequest,
    TickResponse,
)
from grid_snake.server.session_manager import GameSession, SessionManager
from grid_snake.snake import Direction

router = APIRouter(prefix="/games", tags=["games"])


def _get_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


def _get_session(request: Request, game_id: str) -> GameSession:
    try:
        return _get_manager(request).get_session(game_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Game not found.") from exc


def _parse_direction(name: str | None) -> Direction | None:
    if name is None:
        return None
    try:
        return Direction.parse(name)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.post("", status_code=201)
async def create_game(body: CreateGameRequest, request: Request) -> GameSummary:
    """Create a new game. Out-of-range settings fall back to defaults."""
    # The game overrides any starting direction; unknown names are ignored.
    try:
        direction = Direction.parse(body.direction)
    except ValueError:
        direction = Direction.RIGHT
    config = GameConfig(
        width=body.width,
        height=body.height,
        speed=body.speed,
        initial_length=body.initial_length,
        seed=body.seed,
    )
    session = _get_manager(request).create_session(config, direction)
    return session.summary()


@router.get("")
async def list_games(request: Request) -> list[GameSummary]:
    """List all running games."""
    return _get_manager(request).list_sessions()


@router.get("/{game_id}")
async def get_game(game_id: str, request: Request) -> dict:
    """Get the full game state."""
    session = _get_session(request, game_id)
    return {"game_id": game_id, "state": session.game.get_state()}


@router.post("/{game_id}/tick")
async def tick_game(
    game_id: str, body: TickRequest, request: Request,
) -> TickResponse:
    """Advance the game by one tick."""
    session = _get_session(request, game_id)
    direction = _parse_direction(body.direction)
    result = await session.tick(direction)
    return TickResponse(**result.to_dict())


@router.get("/{game_id}/cells/{col}/{row}")
async def get_cell(
    game_id: str, col: int, row: int, request: Request,
) -> CellResponse:
    """Look up the entity in one cell; ``null`` when off the board."""
    session = _get_session(request, game_id)
    entity = session.game.entity_at(col, row)
    return CellResponse(
        col=col,
        row=row,
        entity=entity.name.lower() if entity is not None else None,
    )


@router.delete("/{game_id}", status_code=204)
async def delete_game(game_id: str, request: Request) -> Response:
    """Discard a game."""
    try:
        _get_manager(request).remove_session(game_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Game not found.") from exc
    return Response(status_code=204)
