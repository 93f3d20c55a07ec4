from __future__ import annotations

import pytest
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from fetch_legends.repositories.door import DoorRepository
from fetch_legends.repositories.player import PlayerRepository
from fetch_legends.schemas.world import WorldSeed
from fetch_legends.services.world_seed import load_world_seed, seed_world


def test_packaged_world_is_valid() -> None:
    world = load_world_seed()

    assert world.player.name == "Hero"
    assert {door.id for door in world.doors} >= {"entrance", "exit"}


@pytest.mark.asyncio
async def test_seed_world_populates_empty_store(empty_session: AsyncSession) -> None:
    assert await seed_world(empty_session) is True
    await empty_session.commit()

    player = await PlayerRepository(empty_session).get_player()
    assert player is not None
    entrance = await DoorRepository(empty_session).get("entrance")
    assert entrance is not None
    assert entrance.locked is True


@pytest.mark.asyncio
async def test_seed_world_skips_seeded_store(db_session: AsyncSession) -> None:
    assert await seed_world(db_session) is False


def test_world_seed_rejects_inventory_of_unknown_items() -> None:
    with pytest.raises(ValidationError):
        WorldSeed.model_validate(
            {
                "player": {"name": "Hero", "health": 10, "maxHealth": 10, "level": 1, "gold": 0},
                "items": [],
                "inventory": [{"itemId": "ghost", "quantity": 1}],
            }
        )
