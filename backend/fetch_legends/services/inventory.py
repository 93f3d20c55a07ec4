"""Business logic for the player's inventory."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from fetch_legends.core.errors import NotFoundError
from fetch_legends.models.inventory import InventoryEntry
from fetch_legends.repositories.inventory import InventoryRepository
from fetch_legends.repositories.item import ItemRepository
from fetch_legends.schemas.inventory import InventoryAddRequest

logger = logging.getLogger("fetch_legends.services.inventory")

MAX_STACK = 99


class InventoryService:
    """Pick items up into stacks and drop whole stacks."""

    def __init__(self, inventory_repo: InventoryRepository, item_repo: ItemRepository) -> None:
        self.inventory_repo = inventory_repo
        self.item_repo = item_repo

    @property
    def session(self) -> AsyncSession:
        return self.inventory_repo.session

    async def list_entries(self) -> list[InventoryEntry]:
        return await self.inventory_repo.list_all()

    async def add_item(self, payload: InventoryAddRequest) -> InventoryEntry:
        """Add ``quantity`` of an existing item, growing its stack when already carried."""
        item = await self.item_repo.get(payload.item_id)
        if item is None:
            raise NotFoundError.for_resource("Item", await self.item_repo.list_ids())

        entry = await self.inventory_repo.get(payload.item_id)
        if entry is None:
            entry = InventoryEntry(item_id=item.id, quantity=payload.quantity, item=item)
            await self.inventory_repo.add(entry)
        else:
            entry.quantity = min(entry.quantity + payload.quantity, MAX_STACK)
            await self.session.flush()

        logger.info(
            "Item picked up",
            extra={"item_id": entry.item_id, "quantity": entry.quantity},
        )
        return entry

    async def remove_item(self, item_id: str) -> None:
        entry = await self.inventory_repo.get(item_id)
        if entry is None:
            carried = await self.inventory_repo.list_ids()
            hint = f"You are carrying: {', '.join(carried)}" if carried else "Your inventory is empty."
            raise NotFoundError("Item not in inventory", hint=hint)
        await self.inventory_repo.delete(entry)
        logger.info("Item dropped", extra={"item_id": item_id})


__all__ = ["InventoryService", "MAX_STACK"]
