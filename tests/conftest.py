from __future__ import annotations

from typing import Dict, List, Optional

import pytest

from app.store.models import DrawingStore, GameStore


class FakeRepo:
    """In-memory stand-in for RedisRepo with the same first-match semantics."""

    def __init__(self):
        self.games: Dict[str, List[GameStore]] = {}
        self.drawings: Dict[str, List[DrawingStore]] = {}

    async def ping(self):
        return True

    async def create_game(self, game):
        self.games.setdefault(game.game_code, []).append(game.model_copy(deep=True))

    async def get_game(self, game_code) -> Optional[GameStore]:
        docs = self.games.get(game_code)
        if not docs:
            return None
        return docs[0].model_copy(deep=True)

    async def save_game(self, game):
        self.games[game.game_code][0] = game.model_copy(deep=True)

    async def add_drawing(self, drawing):
        self.drawings.setdefault(drawing.game_code, []).append(drawing.model_copy(deep=True))

    async def list_drawings(self, game_code, completed=None):
        docs = list(self.drawings.get(game_code, []))
        if completed is None:
            return docs
        return [d for d in docs if d.is_completed == completed]

    async def find_drawing(self, game_code, player_name, player_part):
        for d in self.drawings.get(game_code, []):
            if d.player_name == player_name and d.player_part == player_part:
                return d
        return None

    async def completed_player_names(self, game_code, player_part):
        return [
            d.player_name
            for d in self.drawings.get(game_code, [])
            if d.is_completed and d.player_part == player_part
        ]


class FakeApp:
    def __init__(self, repo):
        self.state = type("State", (), {"repo": repo})()


@pytest.fixture
def repo():
    return FakeRepo()


@pytest.fixture
def app(repo):
    return FakeApp(repo)
