from __future__ import annotations

import logging
from typing import List

from app.domain.common.completion import find_incomplete_players
from app.domain.common.errors import DrawingNotFound
from app.store.models import DrawingStore
from app.transport.protocols import (
    InDrawingStatus,
    OutDrawing,
    OutDrawingPoints,
    OutIncompletePlayers,
)
from app.util.timeutil import now_utc

logger = logging.getLogger(__name__)


async def handle_update_drawing_status(*, app, msg: InDrawingStatus) -> OutDrawing:
    repo = app.state.repo

    data = msg.model_dump(exclude={"created_at"})
    drawing = DrawingStore(**data, created_at=msg.created_at or now_utc())
    await repo.add_drawing(drawing)
    logger.debug("game %s: drawing %s/%s stored (completed=%s, %d points)",
                 drawing.game_code, drawing.player_name, drawing.player_part,
                 drawing.is_completed, len(drawing.drawing_points))

    return OutDrawing(message="Drawing status updated successfully", drawing=drawing)


async def handle_incomplete_users(*, app, game_code: str, part_name: str) -> OutIncompletePlayers:
    names = await find_incomplete_players(app.state.repo, game_code, part_name)
    return OutIncompletePlayers(incompletePlayers=names)


async def handle_get_drawing(*, app, game_code: str, player_name: str, part_name: str) -> OutDrawingPoints:
    drawing = await app.state.repo.find_drawing(game_code, player_name, part_name)
    if drawing is None:
        raise DrawingNotFound()
    return OutDrawingPoints(drawing_points=drawing.drawing_points, is_completed=drawing.is_completed)


async def handle_completed_drawings(*, app, game_code: str) -> List[DrawingStore]:
    drawings = await app.state.repo.list_drawings(game_code, completed=True)
    if not drawings:
        raise DrawingNotFound("No completed drawings found")
    return drawings
