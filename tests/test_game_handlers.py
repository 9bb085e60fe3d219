import pytest

from app.domain.common.errors import GameNotFound, JoinRejected
from app.domain.game.handlers import (
    handle_get_game_data,
    handle_store_game_state,
    handle_update_game_status,
    handle_update_game_with_player,
    handle_validate_join_game,
)
from app.transport.protocols import (
    InStoreGameState,
    InUpdateGameStatus,
    InUpdateGameWithPlayer,
    InValidateJoinGame,
)


def _store_msg(**overrides):
    body = {"game_code": "1000", "games_Parts": ["Hat", "Head"], "players": [], "join": True, "start_game": False}
    body.update(overrides)
    return InStoreGameState.model_validate(body)


def _join_msg(name="test", number=82, code="1000"):
    return InValidateJoinGame(game_code=code, player_data={"player_name": name, "player_number": number})


@pytest.mark.asyncio
async def test_store_then_get_returns_same_game(app, repo):
    out = await handle_store_game_state(app=app, msg=_store_msg(drawing_time=60))
    assert out.message == "Game state stored successfully"
    assert out.game.games_parts == ["Hat", "Head"]
    assert out.game.number_of_players == 0

    got = await handle_get_game_data(app=app, game_code="1000")
    assert got.message == "Game data retrieved successfully"
    assert got.game == out.game


@pytest.mark.asyncio
async def test_store_defaults_number_of_players_to_roster_length(app):
    out = await handle_store_game_state(app=app, msg=_store_msg(players=[{"player_name": "a"}, {"player_name": "b"}]))
    assert out.game.number_of_players == 2
    assert out.game.players[0].player_body_images == []


@pytest.mark.asyncio
async def test_get_missing_game(app):
    with pytest.raises(GameNotFound):
        await handle_get_game_data(app=app, game_code="404")


@pytest.mark.asyncio
async def test_join_open_room_appends_player(app, repo):
    await handle_store_game_state(app=app, msg=_store_msg())

    out = await handle_validate_join_game(app=app, msg=_join_msg())
    assert out.canJoin is True
    assert out.message == "User joined the game successfully"
    assert out.game.number_of_players == 1
    assert [p.player_name for p in out.game.players] == ["test"]
    assert out.game.players[0].game_code == "1000"
    assert out.game.players[0].player_body_images == []

    stored = await repo.get_game("1000")
    assert stored.number_of_players == len(stored.players) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("join", [True, False])
async def test_join_started_room_rejected_regardless_of_join_flag(app, repo, join):
    await handle_store_game_state(app=app, msg=_store_msg(start_game=True, join=join))

    with pytest.raises(JoinRejected) as exc:
        await handle_validate_join_game(app=app, msg=_join_msg())
    assert exc.value.message == "Room already started"
    assert exc.value.to_body() == {"message": "Room already started", "canJoin": False}
    assert (await repo.get_game("1000")).players == []


@pytest.mark.asyncio
async def test_join_closed_room_rejected(app, repo):
    await handle_store_game_state(app=app, msg=_store_msg(join=False))

    with pytest.raises(JoinRejected) as exc:
        await handle_validate_join_game(app=app, msg=_join_msg())
    assert exc.value.message == "Room is not accepting new players"
    assert (await repo.get_game("1000")).number_of_players == 0


@pytest.mark.asyncio
async def test_join_missing_game(app):
    with pytest.raises(GameNotFound):
        await handle_validate_join_game(app=app, msg=_join_msg(code="404"))


@pytest.mark.asyncio
async def test_update_game_with_player_skips_lobby_checks(app):
    await handle_store_game_state(app=app, msg=_store_msg(start_game=True, join=False))

    msg = InUpdateGameWithPlayer(
        game_code="1000",
        player_data={"player_name": "late", "player_body_images": ["img"]},
    )
    out = await handle_update_game_with_player(app=app, msg=msg)
    assert out.message == "Game updated successfully"
    assert out.game.number_of_players == 1
    assert out.game.players[0].player_body_images == ["img"]


@pytest.mark.asyncio
async def test_update_game_status_only_touches_given_fields(app, repo):
    await handle_store_game_state(app=app, msg=_store_msg(drawing_time=30))

    out = await handle_update_game_status(app=app, msg=InUpdateGameStatus(game_code="1000", start_game=True))
    assert out.message == "Game status updated successfully"
    assert out.game.start_game is True
    assert out.game.join is True
    assert out.game.drawing_time == 30

    out = await handle_update_game_status(app=app, msg=InUpdateGameStatus(game_code="1000", join=False, drawing_time=90))
    assert out.game.start_game is True
    assert out.game.join is False
    assert out.game.drawing_time == 90


@pytest.mark.asyncio
async def test_update_game_status_missing_game(app):
    with pytest.raises(GameNotFound):
        await handle_update_game_status(app=app, msg=InUpdateGameStatus(game_code="404", join=True))


@pytest.mark.asyncio
async def test_duplicate_codes_resolve_to_first_game(app, repo):
    await handle_store_game_state(app=app, msg=_store_msg(games_Parts=["Hat"]))
    await handle_store_game_state(app=app, msg=_store_msg(games_Parts=["Legs"]))

    got = await handle_get_game_data(app=app, game_code="1000")
    assert got.game.games_parts == ["Hat"]
