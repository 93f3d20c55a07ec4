"""Business logic for doors: unlocking, opening, replacing."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from fetch_legends.core.errors import BadRequestError, NotFoundError
from fetch_legends.models.door import Door
from fetch_legends.repositories.door import DoorRepository
from fetch_legends.schemas.door import DoorReplaceRequest, DoorUpdateRequest

logger = logging.getLogger("fetch_legends.services.doors")


class DoorService:
    """Door rules: a locked door stays closed."""

    def __init__(self, door_repo: DoorRepository) -> None:
        self.door_repo = door_repo

    @property
    def session(self) -> AsyncSession:
        return self.door_repo.session

    async def list_doors(self) -> list[Door]:
        return await self.door_repo.list_all()

    async def get_door(self, door_id: str) -> Door:
        door = await self.door_repo.get(door_id)
        if door is None:
            raise NotFoundError.for_resource("Door", await self.door_repo.list_ids())
        return door

    async def update_door(self, door_id: str, payload: DoorUpdateRequest) -> Door:
        door = await self.get_door(door_id)
        locked = door.locked if payload.locked is None else payload.locked
        is_open = door.open if payload.open is None else payload.open
        self._ensure_consistent(door, locked=locked, is_open=is_open, opening=payload.open is True)

        door.locked = locked
        door.open = is_open
        await self.session.flush()
        logger.info(
            "Door updated",
            extra={"door_id": door.id, "locked": door.locked, "open": door.open},
        )
        return door

    async def replace_door(self, door_id: str, payload: DoorReplaceRequest) -> Door:
        door = await self.get_door(door_id)
        self._ensure_consistent(door, locked=payload.locked, is_open=payload.open, opening=payload.open)

        door.name = payload.name
        door.locked = payload.locked
        door.open = payload.open
        door.leads_to = payload.leads_to
        await self.session.flush()
        return door

    @staticmethod
    def _ensure_consistent(door: Door, *, locked: bool, is_open: bool, opening: bool) -> None:
        if not (locked and is_open):
            return
        if opening:
            raise BadRequestError(
                f"{door.name} is locked",
                hint="PATCH the door with locked=false first.",
                example=f'PATCH /doors/{door.id} {{"locked": false}}',
            )
        raise BadRequestError(
            f"{door.name} is open",
            hint="Close the door before locking it.",
            example=f'PATCH /doors/{door.id} {{"open": false}}',
        )


__all__ = ["DoorService"]
