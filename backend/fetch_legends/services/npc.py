"""Business logic for NPCs."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from fetch_legends.core.errors import NotFoundError
from fetch_legends.models.npc import Npc
from fetch_legends.repositories.npc import NpcRepository
from fetch_legends.schemas.npc import NpcUpdateRequest


class NpcService:
    def __init__(self, npc_repo: NpcRepository) -> None:
        self.npc_repo = npc_repo

    @property
    def session(self) -> AsyncSession:
        return self.npc_repo.session

    async def list_npcs(self) -> list[Npc]:
        return await self.npc_repo.list_all()

    async def get_npc(self, npc_id: str) -> Npc:
        npc = await self.npc_repo.get(npc_id)
        if npc is None:
            raise NotFoundError.for_resource("NPC", await self.npc_repo.list_ids())
        return npc

    async def update_npc(self, npc_id: str, payload: NpcUpdateRequest) -> Npc:
        npc = await self.get_npc(npc_id)
        if payload.dialogue is not None:
            npc.dialogue = payload.dialogue
        if payload.mood is not None:
            npc.mood = payload.mood
        await self.session.flush()
        return npc


__all__ = ["NpcService"]
