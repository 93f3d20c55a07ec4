"""Enemy endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from fetch_legends.core.db import get_session
from fetch_legends.core.errors import EXAMPLE_KEY
from fetch_legends.repositories.enemy import EnemyRepository
from fetch_legends.schemas.enemy import EnemyListResponse, EnemyResponse, EnemyUpdateRequest
from fetch_legends.services.enemy import EnemyService

router = APIRouter(tags=["enemies"])

EnemyId = Annotated[str, Path(description="Enemy identifier, e.g. green_slime")]


async def get_enemy_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> EnemyService:
    return EnemyService(EnemyRepository(session))


@router.get("/enemies", response_model=EnemyListResponse, summary="List enemies")
async def list_enemies(
    service: Annotated[EnemyService, Depends(get_enemy_service)],
) -> EnemyListResponse:
    enemies = await service.list_enemies()
    return EnemyListResponse(data=[EnemyResponse.model_validate(enemy) for enemy in enemies])


@router.get("/enemies/{enemy_id}", response_model=EnemyResponse, summary="Fetch a single enemy")
async def get_enemy(
    enemy_id: EnemyId,
    service: Annotated[EnemyService, Depends(get_enemy_service)],
) -> EnemyResponse:
    return EnemyResponse.model_validate(await service.get_enemy(enemy_id))


@router.patch(
    "/enemies/{enemy_id}",
    response_model=EnemyResponse,
    summary="Set an enemy's health",
    openapi_extra={EXAMPLE_KEY: {"health": 3}},
)
async def update_enemy(
    enemy_id: EnemyId,
    payload: EnemyUpdateRequest,
    service: Annotated[EnemyService, Depends(get_enemy_service)],
) -> EnemyResponse:
    enemy = await service.update_enemy(enemy_id, payload)
    await service.session.commit()
    return EnemyResponse.model_validate(enemy)


@router.delete(
    "/enemies/{enemy_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Defeat an enemy",
)
async def defeat_enemy(
    enemy_id: EnemyId,
    service: Annotated[EnemyService, Depends(get_enemy_service)],
) -> Response:
    await service.defeat_enemy(enemy_id)
    await service.session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["get_enemy_service", "router"]
