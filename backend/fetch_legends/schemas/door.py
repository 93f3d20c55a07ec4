"""Pydantic schemas powering the /doors endpoints."""

from __future__ import annotations

from pydantic import Field, model_validator

from fetch_legends.schemas.base import CamelModel, Slug


class DoorResponse(CamelModel):
    id: str
    name: str
    locked: bool
    open: bool
    leads_to: str | None


class DoorListResponse(CamelModel):
    data: list[DoorResponse]


class DoorUpdateRequest(CamelModel):
    """Request body for PATCH /doors/{door_id}."""

    locked: bool | None = None
    open: bool | None = None

    @model_validator(mode="after")
    def _ensure_non_empty(self) -> "DoorUpdateRequest":
        if self.locked is None and self.open is None:
            raise ValueError("Send locked and/or open.")
        return self


class DoorReplaceRequest(CamelModel):
    """Request body for PUT /doors/{door_id}."""

    name: str = Field(min_length=1, max_length=100)
    locked: bool
    open: bool
    leads_to: Slug | None = None


__all__ = ["DoorListResponse", "DoorReplaceRequest", "DoorResponse", "DoorUpdateRequest"]
