"""Pydantic schemas powering the /enemies endpoints."""

from __future__ import annotations

from pydantic import Field

from fetch_legends.schemas.base import CamelModel


class EnemyResponse(CamelModel):
    id: str
    name: str
    health: int
    damage: int


class EnemyListResponse(CamelModel):
    data: list[EnemyResponse]


class EnemyUpdateRequest(CamelModel):
    """Request body for PATCH /enemies/{enemy_id}."""

    health: int = Field(ge=0)


__all__ = ["EnemyListResponse", "EnemyResponse", "EnemyUpdateRequest"]
