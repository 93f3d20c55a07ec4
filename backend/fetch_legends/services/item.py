"""Business logic around item CRUD."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from fetch_legends.core.errors import ConflictError, NotFoundError
from fetch_legends.models.item import Item
from fetch_legends.repositories.inventory import InventoryRepository
from fetch_legends.repositories.item import ItemRepository
from fetch_legends.schemas.item import ItemCreateRequest, ItemReplaceRequest, ItemUpdateRequest

logger = logging.getLogger("fetch_legends.services.items")


class ItemService:
    """Create, read, replace, update and delete world items."""

    def __init__(
        self,
        item_repo: ItemRepository,
        inventory_repo: InventoryRepository | None = None,
    ) -> None:
        self.item_repo = item_repo
        self.inventory_repo = inventory_repo

    @property
    def session(self) -> AsyncSession:
        """Expose shared session for transaction control."""
        return self.item_repo.session

    async def list_items(self) -> list[Item]:
        return await self.item_repo.list_all()

    async def get_item(self, item_id: str) -> Item:
        item = await self.item_repo.get(item_id)
        if item is None:
            raise NotFoundError.for_resource("Item", await self.item_repo.list_ids())
        return item

    async def create_item(self, payload: ItemCreateRequest) -> Item:
        if await self.item_repo.get(payload.id) is not None:
            raise ConflictError(
                f"Item {payload.id} already exists",
                hint=f"Pick another id, or PUT /items/{payload.id} to replace it.",
            )
        item = Item(
            id=payload.id,
            name=payload.name,
            description=payload.description,
            kind=payload.kind,
            value=payload.value,
        )
        await self.item_repo.add(item)
        logger.info("Item created", extra={"item_id": item.id})
        return item

    async def replace_item(self, item_id: str, payload: ItemReplaceRequest) -> Item:
        item = await self.get_item(item_id)
        item.name = payload.name
        item.description = payload.description
        item.kind = payload.kind
        item.value = payload.value
        await self.session.flush()
        return item

    async def update_item(self, item_id: str, payload: ItemUpdateRequest) -> Item:
        item = await self.get_item(item_id)
        if payload.name is not None:
            item.name = payload.name
        if payload.description is not None:
            item.description = payload.description
        if payload.kind is not None:
            item.kind = payload.kind
        if payload.value is not None:
            item.value = payload.value
        await self.session.flush()
        return item

    async def delete_item(self, item_id: str) -> None:
        """Delete an item together with any inventory stack holding it."""
        item = await self.get_item(item_id)
        if self.inventory_repo is not None:
            entry = await self.inventory_repo.get(item_id)
            if entry is not None:
                await self.inventory_repo.delete(entry)
        await self.item_repo.delete(item)
        logger.info("Item deleted", extra={"item_id": item_id})


__all__ = ["ItemService"]
