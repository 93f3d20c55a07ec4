"""Inventory endpoints: pick items up and drop them."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from fetch_legends.core.db import get_session
from fetch_legends.core.errors import EXAMPLE_KEY
from fetch_legends.models.inventory import InventoryEntry
from fetch_legends.repositories.inventory import InventoryRepository
from fetch_legends.repositories.item import ItemRepository
from fetch_legends.schemas.inventory import (
    InventoryAddRequest,
    InventoryEntryResponse,
    InventoryListResponse,
)
from fetch_legends.services.inventory import InventoryService

router = APIRouter(tags=["inventory"])


def _serialize_entry(entry: InventoryEntry) -> InventoryEntryResponse:
    return InventoryEntryResponse(
        item_id=entry.item_id,
        name=entry.item.name,
        quantity=entry.quantity,
    )


async def get_inventory_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> InventoryService:
    return InventoryService(InventoryRepository(session), ItemRepository(session))


@router.get("/inventory", response_model=InventoryListResponse, summary="What the player carries")
async def list_inventory(
    service: Annotated[InventoryService, Depends(get_inventory_service)],
) -> InventoryListResponse:
    entries = await service.list_entries()
    return InventoryListResponse(data=[_serialize_entry(entry) for entry in entries])


@router.post(
    "/inventory",
    response_model=InventoryEntryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Pick up an item",
    openapi_extra={EXAMPLE_KEY: {"itemId": "brass_key"}},
)
async def add_to_inventory(
    payload: InventoryAddRequest,
    service: Annotated[InventoryService, Depends(get_inventory_service)],
) -> InventoryEntryResponse:
    entry = await service.add_item(payload)
    await service.session.commit()
    return _serialize_entry(entry)


@router.delete(
    "/inventory/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Drop a whole stack",
)
async def remove_from_inventory(
    item_id: Annotated[str, Path(description="Identifier of the carried item")],
    service: Annotated[InventoryService, Depends(get_inventory_service)],
) -> Response:
    await service.remove_item(item_id)
    await service.session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["get_inventory_service", "router"]
