from __future__ import annotations

from app.store.models import GameStore, PlayerStore


def append_player(game: GameStore, player_data: dict) -> PlayerStore:
    """
    Add a player to the end of the roster and resync number_of_players.
    The caller persists the game.
    """
    data = dict(player_data)
    data["game_code"] = game.game_code
    if not data.get("player_body_images"):
        data["player_body_images"] = []

    player = PlayerStore(**data)
    game.players.append(player)
    game.number_of_players = len(game.players)
    return player
