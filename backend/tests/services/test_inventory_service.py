from __future__ import annotations

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from fetch_legends.core.errors import NotFoundError
from fetch_legends.repositories.inventory import InventoryRepository
from fetch_legends.repositories.item import ItemRepository
from fetch_legends.schemas.inventory import InventoryAddRequest
from fetch_legends.services.inventory import MAX_STACK, InventoryService


@pytest.fixture()
def inventory_service(db_session: AsyncSession) -> InventoryService:
    return InventoryService(InventoryRepository(db_session), ItemRepository(db_session))


@pytest.mark.asyncio
async def test_pick_up_new_item(inventory_service: InventoryService) -> None:
    entry = await inventory_service.add_item(InventoryAddRequest(item_id="brass_key"))

    assert entry.item_id == "brass_key"
    assert entry.quantity == 1
    assert entry.item.name == "Brass Key"

    names = [e.item.name for e in await inventory_service.list_entries()]
    assert names == ["Brass Key", "Heavy Rock"]


@pytest.mark.asyncio
async def test_pick_up_existing_item_grows_stack(inventory_service: InventoryService) -> None:
    entry = await inventory_service.add_item(InventoryAddRequest(item_id="heavy_rock", quantity=2))
    assert entry.quantity == 3

    entry = await inventory_service.add_item(
        InventoryAddRequest(item_id="heavy_rock", quantity=MAX_STACK)
    )
    assert entry.quantity == MAX_STACK


@pytest.mark.asyncio
async def test_unknown_item_lists_item_ids(inventory_service: InventoryService) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        await inventory_service.add_item(InventoryAddRequest(item_id="dragon_egg"))

    assert exc_info.value.message == "Item not found"
    assert exc_info.value.hint is not None
    assert "brass_key" in exc_info.value.hint


@pytest.mark.asyncio
async def test_drop_item(inventory_service: InventoryService) -> None:
    await inventory_service.remove_item("heavy_rock")

    assert await inventory_service.list_entries() == []


@pytest.mark.asyncio
async def test_drop_item_not_carried(inventory_service: InventoryService) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        await inventory_service.remove_item("rusty_sword")

    assert exc_info.value.message == "Item not in inventory"
    assert exc_info.value.hint == "You are carrying: heavy_rock"
