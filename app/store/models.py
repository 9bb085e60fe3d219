# app/store/models.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from app.util.timeutil import now_utc


class DrawingPoint(BaseModel):
    """One raw pointer/pen sample, exactly as the client canvas reports it."""
    offsetDx: float
    offsetDy: float
    pointType: int = 0
    pressure: float = 1.0


class PlayerStore(BaseModel):
    game_code: Optional[str] = None
    player_name: str
    player_number: Optional[int] = None
    player_image: Optional[str] = None
    # "pass it on": who drew each part of this player's character
    player_body_parts_with_player_names: List[str] = Field(default_factory=list)
    player_body_images: List[str] = Field(default_factory=list)
    player_current_step: List[int] = Field(default_factory=list)


class GameStore(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    game_code: str
    games_parts: List[str] = Field(default_factory=list, alias="games_Parts")
    players: List[PlayerStore] = Field(default_factory=list)
    number_of_players: int = 0
    join: bool = False
    start_game: bool = False
    drawing_time: Optional[int] = None  # seconds per part, advisory only
    created_at: datetime = Field(default_factory=now_utc)

    def roster_names(self) -> List[str]:
        return [p.player_name for p in self.players]


class DrawingStore(BaseModel):
    """
    One submission of one body part.
    Keyed by (game_code, player_name, player_part), but never upserted:
    every submission is a new document.
    """
    game_code: str
    player_name: str
    player_part: str
    drawing_points: List[DrawingPoint] = Field(default_factory=list)
    player_drawing: Optional[str] = None
    player_image: Optional[str] = None
    drawed_parts_of_player: Optional[str] = None
    is_completed: bool = False
    player_id: Optional[int] = None
    created_at: datetime = Field(default_factory=now_utc)
