"""Repository for the player's inventory."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select

from fetch_legends.models.inventory import InventoryEntry
from fetch_legends.models.item import Item
from fetch_legends.repositories.base import BaseRepository


class InventoryRepository(BaseRepository[InventoryEntry]):
    """Inventory stacks keyed by item id, listed in item-name order."""

    model = InventoryEntry

    def _ordering(self) -> tuple[Any, ...]:
        return (Item.name.asc(), InventoryEntry.item_id.asc())

    async def list_all(self) -> list[InventoryEntry]:
        stmt = (
            select(InventoryEntry)
            .join(Item, InventoryEntry.item_id == Item.id)
            .order_by(*self._ordering())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().unique())


__all__ = ["InventoryRepository"]
