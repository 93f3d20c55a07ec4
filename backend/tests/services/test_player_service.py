from __future__ import annotations

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from fetch_legends.core.errors import NotFoundError
from fetch_legends.repositories.player import PlayerRepository
from fetch_legends.schemas.player import PlayerReplaceRequest, PlayerUpdateRequest
from fetch_legends.services.player import PlayerService


@pytest.mark.asyncio
async def test_update_player_clamps_health(db_session: AsyncSession) -> None:
    service = PlayerService(PlayerRepository(db_session))

    player = await service.update_player(PlayerUpdateRequest(health=250))

    assert player.health == player.max_health == 100


@pytest.mark.asyncio
async def test_lowering_max_health_clamps_current_health(db_session: AsyncSession) -> None:
    service = PlayerService(PlayerRepository(db_session))

    player = await service.update_player(PlayerUpdateRequest(max_health=40))

    assert player.max_health == 40
    assert player.health == 40


@pytest.mark.asyncio
async def test_replace_player(db_session: AsyncSession) -> None:
    service = PlayerService(PlayerRepository(db_session))

    player = await service.replace_player(
        PlayerReplaceRequest(name="Legend", health=120, max_health=100, level=2, gold=5)
    )

    assert player.name == "Legend"
    assert player.health == 100
    assert player.level == 2


@pytest.mark.asyncio
async def test_missing_player_is_not_found(empty_session: AsyncSession) -> None:
    service = PlayerService(PlayerRepository(empty_session))

    with pytest.raises(NotFoundError, match="Player not found"):
        await service.get_player()
