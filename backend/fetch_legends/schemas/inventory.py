"""Pydantic schemas powering the /inventory endpoints."""

from __future__ import annotations

from pydantic import Field

from fetch_legends.schemas.base import CamelModel, Slug


class InventoryEntryResponse(CamelModel):
    item_id: str
    name: str
    quantity: int


class InventoryListResponse(CamelModel):
    data: list[InventoryEntryResponse]


class InventoryAddRequest(CamelModel):
    """Request body for POST /inventory."""

    item_id: Slug
    quantity: int = Field(default=1, ge=1, le=99)


__all__ = ["InventoryAddRequest", "InventoryEntryResponse", "InventoryListResponse"]
