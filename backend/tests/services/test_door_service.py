from __future__ import annotations

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from fetch_legends.core.errors import BadRequestError, NotFoundError
from fetch_legends.repositories.door import DoorRepository
from fetch_legends.schemas.door import DoorReplaceRequest, DoorUpdateRequest
from fetch_legends.services.door import DoorService


@pytest.fixture()
def door_service(db_session: AsyncSession) -> DoorService:
    return DoorService(DoorRepository(db_session))


@pytest.mark.asyncio
async def test_unlock_then_open(door_service: DoorService) -> None:
    door = await door_service.update_door("entrance", DoorUpdateRequest(locked=False))
    assert door.locked is False
    assert door.open is False

    door = await door_service.update_door("entrance", DoorUpdateRequest(open=True))
    assert door.open is True


@pytest.mark.asyncio
async def test_locked_door_cannot_be_opened(door_service: DoorService) -> None:
    with pytest.raises(BadRequestError) as exc_info:
        await door_service.update_door("entrance", DoorUpdateRequest(open=True))

    error = exc_info.value
    assert error.message == "Entrance Gate is locked"
    assert error.example == 'PATCH /doors/entrance {"locked": false}'

    door = await door_service.get_door("entrance")
    assert door.open is False


@pytest.mark.asyncio
async def test_open_door_cannot_be_locked(door_service: DoorService) -> None:
    await door_service.update_door("cellar", DoorUpdateRequest(open=True))

    with pytest.raises(BadRequestError, match="is open"):
        await door_service.update_door("cellar", DoorUpdateRequest(locked=True))


@pytest.mark.asyncio
async def test_replace_door_rewrites_every_field(door_service: DoorService) -> None:
    door = await door_service.replace_door(
        "exit",
        DoorReplaceRequest(name="Back Door", locked=False, open=True, leads_to="garden"),
    )

    assert door.name == "Back Door"
    assert door.open is True
    assert door.leads_to == "garden"


@pytest.mark.asyncio
async def test_unknown_door_lists_valid_ids(door_service: DoorService) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        await door_service.get_door("attic")

    assert exc_info.value.message == "Door not found"
    assert exc_info.value.hint == "Valid ids: cellar, entrance, exit"
