"""Pydantic schemas powering the /items endpoints."""

from __future__ import annotations

from pydantic import Field, model_validator

from fetch_legends.models.item import ItemKind
from fetch_legends.schemas.base import CamelModel, Slug


class ItemResponse(CamelModel):
    id: str
    name: str
    description: str
    kind: ItemKind
    value: int


class ItemListResponse(CamelModel):
    data: list[ItemResponse]


class ItemReplaceRequest(CamelModel):
    """Request body for PUT /items/{item_id}: every field is required."""

    name: str = Field(min_length=1, max_length=100)
    description: str = Field(max_length=1000)
    kind: ItemKind
    value: int = Field(ge=0)


class ItemCreateRequest(CamelModel):
    """Request body for POST /items."""

    id: Slug
    name: str = Field(min_length=1, max_length=100)
    description: str = Field(default="", max_length=1000)
    kind: ItemKind = ItemKind.JUNK
    value: int = Field(default=0, ge=0)


class ItemUpdateRequest(CamelModel):
    """Request body for PATCH /items/{item_id}."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=1000)
    kind: ItemKind | None = None
    value: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _ensure_non_empty(self) -> "ItemUpdateRequest":
        if all(getattr(self, name) is None for name in type(self).model_fields):
            raise ValueError("Send at least one field to change.")
        return self


__all__ = [
    "ItemCreateRequest",
    "ItemListResponse",
    "ItemReplaceRequest",
    "ItemResponse",
    "ItemUpdateRequest",
]
