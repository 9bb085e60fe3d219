from __future__ import annotations

import logging

from app.domain.common.errors import GameNotFound, JoinRejected
from app.domain.common.roster import append_player
from app.store.models import GameStore, PlayerStore
from app.transport.protocols import (
    InStoreGameState,
    InUpdateGameWithPlayer,
    InUpdateGameStatus,
    InValidateJoinGame,
    OutGame,
    OutJoinedGame,
    OutJoinGame,
)
from app.util.timeutil import now_utc

logger = logging.getLogger(__name__)


async def _load_game(repo, game_code: str) -> GameStore:
    game = await repo.get_game(game_code)
    if game is None:
        raise GameNotFound()
    return game


async def handle_store_game_state(*, app, msg: InStoreGameState) -> OutGame:
    repo = app.state.repo

    players = [PlayerStore(**p.model_dump(exclude_none=True)) for p in msg.players]
    game = GameStore(
        game_code=msg.game_code,
        games_parts=list(msg.games_parts),
        players=players,
        number_of_players=msg.number_of_players if msg.number_of_players is not None else len(players),
        join=msg.join,
        start_game=msg.start_game,
        drawing_time=msg.drawing_time,
        created_at=msg.created_at or now_utc(),
    )
    await repo.create_game(game)
    logger.info("game %s created with parts %s", game.game_code, game.games_parts)

    return OutGame(message="Game state stored successfully", game=game)


async def handle_get_game_data(*, app, game_code: str) -> OutGame:
    game = await _load_game(app.state.repo, game_code)
    return OutGame(message="Game data retrieved successfully", game=game)


async def handle_update_game_with_player(*, app, msg: InUpdateGameWithPlayer) -> OutGame:
    """
    Append a player without the started/closed checks of validate-join.
    Read-modify-write: concurrent appends to one game can lose an update.
    """
    repo = app.state.repo
    game = await _load_game(repo, msg.game_code)

    append_player(game, msg.player_data.model_dump(exclude_none=True))
    await repo.save_game(game)
    logger.info("game %s: player %s added (%d players)",
                game.game_code, msg.player_data.player_name, game.number_of_players)

    return OutGame(message="Game updated successfully", game=game)


async def handle_update_game_status(*, app, msg: InUpdateGameStatus) -> OutGame:
    repo = app.state.repo
    game = await _load_game(repo, msg.game_code)

    changes = msg.model_dump(include={"start_game", "join", "drawing_time"}, exclude_unset=True)
    for k, v in changes.items():
        if v is not None:
            setattr(game, k, v)

    await repo.save_game(game)
    logger.info("game %s status updated: %s", game.game_code, changes)

    return OutGame(message="Game status updated successfully", game=game)


async def handle_validate_join_game(*, app, msg: InValidateJoinGame) -> OutJoinGame:
    repo = app.state.repo
    game = await _load_game(repo, msg.game_code)

    # started wins over closed, whatever the join flag says
    if game.start_game:
        logger.info("game %s: join by %s rejected, already started", game.game_code, msg.player_data.player_name)
        raise JoinRejected("Room already started")
    if not game.join:
        logger.info("game %s: join by %s rejected, room closed", game.game_code, msg.player_data.player_name)
        raise JoinRejected("Room is not accepting new players")

    append_player(game, msg.player_data.model_dump(exclude_none=True))
    await repo.save_game(game)
    logger.info("game %s: player %s joined (%d players)",
                game.game_code, msg.player_data.player_name, game.number_of_players)

    return OutJoinGame(
        message="User joined the game successfully",
        canJoin=True,
        game=OutJoinedGame(
            game_code=game.game_code,
            number_of_players=game.number_of_players,
            games_parts=game.games_parts,
            players=game.players,
        ),
    )
