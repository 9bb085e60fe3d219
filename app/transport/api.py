# app/transport/api.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Request

from app.domain.drawing.handlers import (
    handle_completed_drawings,
    handle_get_drawing,
    handle_incomplete_users,
    handle_update_drawing_status,
)
from app.domain.game.handlers import (
    handle_get_game_data,
    handle_store_game_state,
    handle_update_game_status,
    handle_update_game_with_player,
    handle_validate_join_game,
)
from app.store.models import DrawingStore
from app.transport.protocols import (
    InDrawingStatus,
    InStoreGameState,
    InUpdateGameStatus,
    InUpdateGameWithPlayer,
    InValidateJoinGame,
    OutDrawing,
    OutDrawingPoints,
    OutError,
    OutGame,
    OutIncompletePlayers,
    OutJoinGame,
)

router = APIRouter(prefix="/api", tags=["Game"])

INVALID = {400: {"model": OutError, "description": "Invalid input"}}
GAME_NOT_FOUND = {404: {"model": OutError, "description": "Game not found"}}


@router.post("/storeGameState", status_code=201, response_model=OutGame, responses=INVALID)
async def store_game_state(msg: InStoreGameState, request: Request):
    """Store the game state of a new lobby."""
    return await handle_store_game_state(app=request.app, msg=msg)


@router.post("/updateDrawingStatus", status_code=201, response_model=OutDrawing, responses=INVALID)
async def update_drawing_status(msg: InDrawingStatus, request: Request):
    """Record one drawing submission for a player and part."""
    return await handle_update_drawing_status(app=request.app, msg=msg)


@router.get(
    "/incompleteUsers/{game_code}/{part_name}",
    response_model=OutIncompletePlayers,
    responses=GAME_NOT_FOUND,
)
async def incomplete_users(game_code: str, part_name: str, request: Request):
    """Players of the game who have not completed the given part yet."""
    return await handle_incomplete_users(app=request.app, game_code=game_code, part_name=part_name)


@router.get(
    "/getDrawing/{game_code}/{player_name}/{part_name}",
    response_model=OutDrawingPoints,
    responses={404: {"model": OutError, "description": "Drawing not found"}},
)
async def get_drawing(game_code: str, player_name: str, part_name: str, request: Request):
    return await handle_get_drawing(
        app=request.app, game_code=game_code, player_name=player_name, part_name=part_name
    )


@router.get(
    "/completedDrawings/{game_code}",
    response_model=List[DrawingStore],
    responses={404: {"model": OutError, "description": "No completed drawings found"}},
)
async def completed_drawings(game_code: str, request: Request):
    return await handle_completed_drawings(app=request.app, game_code=game_code)


@router.put("/updateGameWithPlayer", response_model=OutGame, responses=GAME_NOT_FOUND)
async def update_game_with_player(msg: InUpdateGameWithPlayer, request: Request):
    """Append a player to the roster (no started/closed checks)."""
    return await handle_update_game_with_player(app=request.app, msg=msg)


@router.put("/updateGameStatus", response_model=OutGame, responses=GAME_NOT_FOUND)
async def update_game_status(msg: InUpdateGameStatus, request: Request):
    """Update lobby flags; fields missing from the body are left alone."""
    return await handle_update_game_status(app=request.app, msg=msg)


@router.post(
    "/validateJoinGame",
    response_model=OutJoinGame,
    responses={
        400: {"model": OutError, "description": "Game has already started or room is closed"},
        **GAME_NOT_FOUND,
    },
)
async def validate_join_game(msg: InValidateJoinGame, request: Request):
    """Validate that the player can join, and add them if so."""
    return await handle_validate_join_game(app=request.app, msg=msg)


@router.get("/getGameData/{game_code}", response_model=OutGame, responses=GAME_NOT_FOUND)
async def get_game_data(game_code: str, request: Request):
    return await handle_get_game_data(app=request.app, game_code=game_code)
