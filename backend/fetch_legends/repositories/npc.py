"""Repository for NPCs."""

from __future__ import annotations

from fetch_legends.models.npc import Npc
from fetch_legends.repositories.base import BaseRepository


class NpcRepository(BaseRepository[Npc]):
    model = Npc


__all__ = ["NpcRepository"]
