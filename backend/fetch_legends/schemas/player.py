"""Pydantic schemas powering the /player endpoints."""

from __future__ import annotations

from pydantic import Field, model_validator

from fetch_legends.schemas.base import CamelModel


class PlayerResponse(CamelModel):
    name: str
    health: int
    max_health: int
    level: int
    gold: int
    completed_challenges: list[str] = Field(default_factory=list)


class PlayerReplaceRequest(CamelModel):
    """Request body for PUT /player: every field is required."""

    name: str = Field(min_length=1, max_length=50)
    health: int = Field(ge=0)
    max_health: int = Field(ge=1)
    level: int = Field(ge=1)
    gold: int = Field(ge=0)


class PlayerUpdateRequest(CamelModel):
    """Request body for PATCH /player."""

    name: str | None = Field(default=None, min_length=1, max_length=50)
    health: int | None = Field(default=None, ge=0)
    max_health: int | None = Field(default=None, ge=1)
    level: int | None = Field(default=None, ge=1)
    gold: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _ensure_non_empty(self) -> "PlayerUpdateRequest":
        if all(getattr(self, name) is None for name in type(self).model_fields):
            raise ValueError("Send at least one field to change.")
        return self


__all__ = ["PlayerReplaceRequest", "PlayerResponse", "PlayerUpdateRequest"]
