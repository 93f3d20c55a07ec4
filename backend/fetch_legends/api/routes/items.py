"""Item endpoints covering full CRUD."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from fetch_legends.core.db import get_session
from fetch_legends.core.errors import EXAMPLE_KEY
from fetch_legends.repositories.inventory import InventoryRepository
from fetch_legends.repositories.item import ItemRepository
from fetch_legends.schemas.item import (
    ItemCreateRequest,
    ItemListResponse,
    ItemReplaceRequest,
    ItemResponse,
    ItemUpdateRequest,
)
from fetch_legends.services.item import ItemService

router = APIRouter(tags=["items"])

ItemId = Annotated[str, Path(description="Item identifier, e.g. rusty_sword")]


async def get_item_service(session: Annotated[AsyncSession, Depends(get_session)]) -> ItemService:
    return ItemService(ItemRepository(session), InventoryRepository(session))


@router.get("/items", response_model=ItemListResponse, summary="List every item in the world")
async def list_items(
    service: Annotated[ItemService, Depends(get_item_service)],
) -> ItemListResponse:
    items = await service.list_items()
    return ItemListResponse(data=[ItemResponse.model_validate(item) for item in items])


@router.post(
    "/items",
    response_model=ItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new item",
    openapi_extra={
        EXAMPLE_KEY: {"id": "wooden_shield", "name": "Wooden Shield", "kind": "tool", "value": 4}
    },
)
async def create_item(
    payload: ItemCreateRequest,
    service: Annotated[ItemService, Depends(get_item_service)],
) -> ItemResponse:
    item = await service.create_item(payload)
    await service.session.commit()
    return ItemResponse.model_validate(item)


@router.get("/items/{item_id}", response_model=ItemResponse, summary="Fetch a single item")
async def get_item(
    item_id: ItemId,
    service: Annotated[ItemService, Depends(get_item_service)],
) -> ItemResponse:
    return ItemResponse.model_validate(await service.get_item(item_id))


@router.put(
    "/items/{item_id}",
    response_model=ItemResponse,
    summary="Replace an item",
    openapi_extra={
        EXAMPLE_KEY: {"name": "Shiny Sword", "description": "Polished.", "kind": "weapon", "value": 9}
    },
)
async def replace_item(
    item_id: ItemId,
    payload: ItemReplaceRequest,
    service: Annotated[ItemService, Depends(get_item_service)],
) -> ItemResponse:
    item = await service.replace_item(item_id, payload)
    await service.session.commit()
    return ItemResponse.model_validate(item)


@router.patch(
    "/items/{item_id}",
    response_model=ItemResponse,
    summary="Change some fields of an item",
    openapi_extra={EXAMPLE_KEY: {"value": 7}},
)
async def update_item(
    item_id: ItemId,
    payload: ItemUpdateRequest,
    service: Annotated[ItemService, Depends(get_item_service)],
) -> ItemResponse:
    item = await service.update_item(item_id, payload)
    await service.session.commit()
    return ItemResponse.model_validate(item)


@router.delete("/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete an item")
async def delete_item(
    item_id: ItemId,
    service: Annotated[ItemService, Depends(get_item_service)],
) -> Response:
    await service.delete_item(item_id)
    await service.session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["get_item_service", "router"]
