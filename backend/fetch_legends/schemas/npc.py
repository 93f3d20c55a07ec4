"""Pydantic schemas powering the /npcs endpoints."""

from __future__ import annotations

from pydantic import Field, model_validator

from fetch_legends.models.npc import NpcMood
from fetch_legends.schemas.base import CamelModel


class NpcResponse(CamelModel):
    id: str
    name: str
    dialogue: str
    mood: NpcMood


class NpcListResponse(CamelModel):
    data: list[NpcResponse]


class NpcUpdateRequest(CamelModel):
    """Request body for PATCH /npcs/{npc_id}."""

    dialogue: str | None = Field(default=None, min_length=1, max_length=500)
    mood: NpcMood | None = None

    @model_validator(mode="after")
    def _ensure_non_empty(self) -> "NpcUpdateRequest":
        if self.dialogue is None and self.mood is None:
            raise ValueError("Send dialogue and/or mood.")
        return self


__all__ = ["NpcListResponse", "NpcResponse", "NpcUpdateRequest"]
