"""NPC endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from fetch_legends.core.db import get_session
from fetch_legends.core.errors import EXAMPLE_KEY
from fetch_legends.repositories.npc import NpcRepository
from fetch_legends.schemas.npc import NpcListResponse, NpcResponse, NpcUpdateRequest
from fetch_legends.services.npc import NpcService

router = APIRouter(tags=["npcs"])

NpcId = Annotated[str, Path(description="NPC identifier, e.g. old_sage")]


async def get_npc_service(session: Annotated[AsyncSession, Depends(get_session)]) -> NpcService:
    return NpcService(NpcRepository(session))


@router.get("/npcs", response_model=NpcListResponse, summary="List NPCs")
async def list_npcs(service: Annotated[NpcService, Depends(get_npc_service)]) -> NpcListResponse:
    npcs = await service.list_npcs()
    return NpcListResponse(data=[NpcResponse.model_validate(npc) for npc in npcs])


@router.get("/npcs/{npc_id}", response_model=NpcResponse, summary="Talk to an NPC")
async def get_npc(
    npc_id: NpcId,
    service: Annotated[NpcService, Depends(get_npc_service)],
) -> NpcResponse:
    return NpcResponse.model_validate(await service.get_npc(npc_id))


@router.patch(
    "/npcs/{npc_id}",
    response_model=NpcResponse,
    summary="Change an NPC's dialogue or mood",
    openapi_extra={EXAMPLE_KEY: {"mood": "friendly"}},
)
async def update_npc(
    npc_id: NpcId,
    payload: NpcUpdateRequest,
    service: Annotated[NpcService, Depends(get_npc_service)],
) -> NpcResponse:
    npc = await service.update_npc(npc_id, payload)
    await service.session.commit()
    return NpcResponse.model_validate(npc)


__all__ = ["get_npc_service", "router"]
