"""Player endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fetch_legends.api.dependencies import get_progress_service
from fetch_legends.core.db import get_session
from fetch_legends.core.errors import EXAMPLE_KEY
from fetch_legends.models.player import Player
from fetch_legends.repositories.player import PlayerRepository
from fetch_legends.schemas.player import (
    PlayerReplaceRequest,
    PlayerResponse,
    PlayerUpdateRequest,
)
from fetch_legends.services.player import PlayerService
from fetch_legends.services.progress import ProgressService

router = APIRouter(tags=["player"])


async def get_player_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> PlayerService:
    return PlayerService(PlayerRepository(session))


async def _serialize_player(player: Player, progress: ProgressService) -> PlayerResponse:
    return PlayerResponse(
        name=player.name,
        health=player.health,
        max_health=player.max_health,
        level=player.level,
        gold=player.gold,
        completed_challenges=await progress.completed_ids(),
    )


@router.get("/player", response_model=PlayerResponse, summary="Your character sheet")
async def get_player(
    service: Annotated[PlayerService, Depends(get_player_service)],
    progress: Annotated[ProgressService, Depends(get_progress_service)],
) -> PlayerResponse:
    return await _serialize_player(await service.get_player(), progress)


@router.patch(
    "/player",
    response_model=PlayerResponse,
    summary="Change some fields of the player",
    openapi_extra={EXAMPLE_KEY: {"health": 100}},
)
async def update_player(
    payload: PlayerUpdateRequest,
    service: Annotated[PlayerService, Depends(get_player_service)],
    progress: Annotated[ProgressService, Depends(get_progress_service)],
) -> PlayerResponse:
    player = await service.update_player(payload)
    await service.session.commit()
    return await _serialize_player(player, progress)


@router.put(
    "/player",
    response_model=PlayerResponse,
    summary="Replace the player",
    openapi_extra={
        EXAMPLE_KEY: {"name": "Legend", "health": 100, "maxHealth": 100, "level": 2, "gold": 5}
    },
)
async def replace_player(
    payload: PlayerReplaceRequest,
    service: Annotated[PlayerService, Depends(get_player_service)],
    progress: Annotated[ProgressService, Depends(get_progress_service)],
) -> PlayerResponse:
    player = await service.replace_player(payload)
    await service.session.commit()
    return await _serialize_player(player, progress)


__all__ = ["get_player_service", "router"]
