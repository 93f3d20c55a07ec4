"""Door endpoints: look at doors, unlock and open them."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from fetch_legends.core.db import get_session
from fetch_legends.core.errors import EXAMPLE_KEY
from fetch_legends.repositories.door import DoorRepository
from fetch_legends.schemas.door import (
    DoorListResponse,
    DoorReplaceRequest,
    DoorResponse,
    DoorUpdateRequest,
)
from fetch_legends.services.door import DoorService

router = APIRouter(tags=["doors"])

DoorId = Annotated[str, Path(description="Door identifier, e.g. entrance")]


async def get_door_service(session: Annotated[AsyncSession, Depends(get_session)]) -> DoorService:
    return DoorService(DoorRepository(session))


@router.get("/doors", response_model=DoorListResponse, summary="List doors")
async def list_doors(
    service: Annotated[DoorService, Depends(get_door_service)],
) -> DoorListResponse:
    doors = await service.list_doors()
    return DoorListResponse(data=[DoorResponse.model_validate(door) for door in doors])


@router.get("/doors/{door_id}", response_model=DoorResponse, summary="Fetch a single door")
async def get_door(
    door_id: DoorId,
    service: Annotated[DoorService, Depends(get_door_service)],
) -> DoorResponse:
    return DoorResponse.model_validate(await service.get_door(door_id))


@router.patch(
    "/doors/{door_id}",
    response_model=DoorResponse,
    summary="Lock, unlock, open or close a door",
    openapi_extra={EXAMPLE_KEY: {"locked": False}},
)
async def update_door(
    door_id: DoorId,
    payload: DoorUpdateRequest,
    service: Annotated[DoorService, Depends(get_door_service)],
) -> DoorResponse:
    door = await service.update_door(door_id, payload)
    await service.session.commit()
    return DoorResponse.model_validate(door)


@router.put(
    "/doors/{door_id}",
    response_model=DoorResponse,
    summary="Replace a door",
    openapi_extra={
        EXAMPLE_KEY: {"name": "Entrance Gate", "locked": False, "open": True, "leadsTo": "great_hall"}
    },
)
async def replace_door(
    door_id: DoorId,
    payload: DoorReplaceRequest,
    service: Annotated[DoorService, Depends(get_door_service)],
) -> DoorResponse:
    door = await service.replace_door(door_id, payload)
    await service.session.commit()
    return DoorResponse.model_validate(door)


__all__ = ["get_door_service", "router"]
