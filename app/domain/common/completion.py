from __future__ import annotations

from typing import Iterable, List

from app.domain.common.errors import GameNotFound


def incomplete_players(roster_names: Iterable[str], completed_names: Iterable[str]) -> List[str]:
    """
    Roster names minus completed names, in roster order.
    Duplicates in the roster survive; no record and a non-completed record
    both count as incomplete.
    """
    done = set(completed_names)
    return [name for name in roster_names if name not in done]


async def find_incomplete_players(repo, game_code: str, part_name: str) -> List[str]:
    game = await repo.get_game(game_code)
    if game is None:
        raise GameNotFound()

    completed = await repo.completed_player_names(game_code, part_name)
    return incomplete_players(game.roster_names(), completed)
