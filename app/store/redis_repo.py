# app/store/redis_repo.py
from __future__ import annotations

import logging
from typing import Optional

from redis.asyncio import Redis
from redis.exceptions import ResponseError

from app.domain.common.errors import GameNotFound
from app.store.redis_keys import GK
from app.store.models import GameStore, DrawingStore

logger = logging.getLogger(__name__)


class RedisRepo:
    def __init__(self, r: Redis, game_ttl_sec: int = 0):
        self.r = r
        self.game_ttl_sec = game_ttl_sec

    def _dec(self, x):
        """Decode redis bytes -> str; pass through str/None."""
        if isinstance(x, bytes):
            return x.decode("utf-8")
        return x

    # ----------------------------
    # Helpers
    # ----------------------------
    async def ping(self) -> bool:
        return bool(await self.r.ping())

    async def refresh_game_ttl(self, game_code: str) -> None:
        if self.game_ttl_sec <= 0:
            return
        pipe = self.r.pipeline()
        for k in GK(game_code).all_game_keys():
            pipe.expire(k, self.game_ttl_sec)
        await pipe.execute()

    # ----------------------------
    # Games
    # ----------------------------
    async def create_game(self, game: GameStore) -> None:
        # Codes are not unique: a second create queues behind the first,
        # and lookups keep answering with the first document.
        count = await self.r.rpush(GK(game.game_code).game(), game.model_dump_json(by_alias=True))
        if count > 1:
            logger.warning("game code %s now has %d documents", game.game_code, count)
        await self.refresh_game_ttl(game.game_code)

    async def get_game(self, game_code: str) -> Optional[GameStore]:
        raw = await self.r.lindex(GK(game_code).game(), 0)
        if not raw:
            return None
        return GameStore.model_validate_json(self._dec(raw))

    async def save_game(self, game: GameStore) -> None:
        try:
            await self.r.lset(GK(game.game_code).game(), 0, game.model_dump_json(by_alias=True))
        except ResponseError as exc:
            # the game expired between load and save
            if "no such key" in str(exc).lower():
                raise GameNotFound() from exc
            raise
        await self.refresh_game_ttl(game.game_code)

    # ----------------------------
    # Drawings
    # ----------------------------
    async def add_drawing(self, drawing: DrawingStore) -> None:
        await self.r.rpush(GK(drawing.game_code).drawings(), drawing.model_dump_json())
        await self.refresh_game_ttl(drawing.game_code)

    async def list_drawings(self, game_code: str, completed: Optional[bool] = None) -> list[DrawingStore]:
        raw = await self.r.lrange(GK(game_code).drawings(), 0, -1)
        drawings = [DrawingStore.model_validate_json(self._dec(x)) for x in raw]
        if completed is None:
            return drawings
        return [d for d in drawings if d.is_completed == completed]

    async def find_drawing(self, game_code: str, player_name: str, player_part: str) -> Optional[DrawingStore]:
        for d in await self.list_drawings(game_code):
            if d.player_name == player_name and d.player_part == player_part:
                return d
        return None

    async def completed_player_names(self, game_code: str, player_part: str) -> list[str]:
        drawings = await self.list_drawings(game_code, completed=True)
        return [d.player_name for d in drawings if d.player_part == player_part]
