# app/transport/protocols.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from app.store.models import DrawingPoint, DrawingStore, GameStore, PlayerStore


# =========================
# Incoming (Client -> Server)
# =========================

class InBase(BaseModel):
    # Unknown fields are a client bug, not something to persist silently.
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class InPlayerData(InBase):
    player_name: str = Field(min_length=1)
    player_number: Optional[int] = None
    player_image: Optional[str] = None
    player_body_parts_with_player_names: List[str] = Field(default_factory=list)
    player_body_images: Optional[List[str]] = None
    player_current_step: List[int] = Field(default_factory=list)
    game_code: Optional[str] = None


class InStoreGameState(InBase):
    game_code: str = Field(min_length=1)
    games_parts: List[str] = Field(alias="games_Parts")
    players: List[InPlayerData]
    number_of_players: Optional[int] = None
    join: bool = False
    start_game: bool = False
    drawing_time: Optional[int] = Field(None, ge=0)
    created_at: Optional[datetime] = None


class InDrawingStatus(InBase):
    game_code: str = Field(min_length=1)
    player_name: str = Field(min_length=1)
    player_part: str = Field(min_length=1)
    drawing_points: List[DrawingPoint]
    player_drawing: Optional[str] = None
    player_image: Optional[str] = None
    drawed_parts_of_player: Optional[str] = None
    is_completed: bool = False
    player_id: Optional[int] = None
    created_at: Optional[datetime] = None


class InUpdateGameWithPlayer(InBase):
    game_code: str = Field(min_length=1)
    player_data: InPlayerData


class InValidateJoinGame(InUpdateGameWithPlayer):
    pass


class InUpdateGameStatus(InBase):
    """Only the fields present in the body are applied."""
    game_code: str = Field(min_length=1)
    start_game: Optional[bool] = None
    join: Optional[bool] = None
    drawing_time: Optional[int] = Field(None, ge=0)


# =========================
# Outgoing (Server -> Client)
# =========================

class OutBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class OutError(OutBase):
    message: str
    canJoin: Optional[bool] = None


class OutGame(OutBase):
    message: str
    game: GameStore


class OutDrawing(OutBase):
    message: str
    drawing: DrawingStore


class OutIncompletePlayers(OutBase):
    incompletePlayers: List[str]


class OutDrawingPoints(OutBase):
    drawing_points: List[DrawingPoint]
    is_completed: bool


class OutJoinedGame(OutBase):
    game_code: str
    number_of_players: int
    games_parts: List[str] = Field(alias="games_Parts")
    players: List[PlayerStore]


class OutJoinGame(OutBase):
    message: str
    canJoin: bool
    game: OutJoinedGame
