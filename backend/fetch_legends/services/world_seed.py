"""Load the starting world into an empty store."""

from __future__ import annotations

import logging
from importlib import resources

from sqlalchemy.ext.asyncio import AsyncSession

from fetch_legends.models import Door, Enemy, InventoryEntry, Item, Npc, Player
from fetch_legends.models.player import PLAYER_ID
from fetch_legends.schemas.world import WorldSeed

logger = logging.getLogger("fetch_legends.services.world")

DEFAULT_WORLD_RESOURCE = "world.json"


def load_world_seed() -> WorldSeed:
    resource = resources.files("fetch_legends") / "data" / DEFAULT_WORLD_RESOURCE
    return WorldSeed.model_validate_json(resource.read_bytes())


async def seed_world(session: AsyncSession, seed: WorldSeed | None = None) -> bool:
    """Insert the starting world unless a player already exists.

    Returns True when rows were written. The caller owns the commit.
    """
    if await session.get(Player, PLAYER_ID) is not None:
        return False

    world = seed or load_world_seed()
    session.add(
        Player(
            id=PLAYER_ID,
            name=world.player.name,
            health=min(world.player.health, world.player.max_health),
            max_health=world.player.max_health,
            level=world.player.level,
            gold=world.player.gold,
        )
    )
    session.add_all(
        Item(
            id=item.id,
            name=item.name,
            description=item.description,
            kind=item.kind,
            value=item.value,
        )
        for item in world.items
    )
    session.add_all(
        Door(
            id=door.id,
            name=door.name,
            locked=door.locked,
            open=door.open,
            leads_to=door.leads_to,
        )
        for door in world.doors
    )
    session.add_all(
        Npc(id=npc.id, name=npc.name, dialogue=npc.dialogue, mood=npc.mood) for npc in world.npcs
    )
    session.add_all(
        Enemy(id=enemy.id, name=enemy.name, health=enemy.health, damage=enemy.damage)
        for enemy in world.enemies
    )
    await session.flush()
    session.add_all(
        InventoryEntry(item_id=entry.item_id, quantity=entry.quantity) for entry in world.inventory
    )
    await session.flush()

    logger.info(
        "World seeded",
        extra={
            "items": len(world.items),
            "doors": len(world.doors),
            "npcs": len(world.npcs),
            "enemies": len(world.enemies),
        },
    )
    return True


__all__ = ["load_world_seed", "seed_world"]
