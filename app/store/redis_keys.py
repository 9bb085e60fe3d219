# app/store/redis_keys.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GK:
    """
    Redis Key builder for game-scoped keys.
    """
    game_code: str

    def game(self) -> str:
        # LIST of game JSON documents; index 0 is the one every lookup sees
        return f"game:{self.game_code}"

    def drawings(self) -> str:
        return f"game:{self.game_code}:drawings"  # LIST drawing JSON, append-only

    def all_game_keys(self) -> list[str]:
        """Keys that share the game's TTL policy."""
        return [self.game(), self.drawings()]
