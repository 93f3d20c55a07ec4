"""Repository for doors."""

from __future__ import annotations

from fetch_legends.models.door import Door
from fetch_legends.repositories.base import BaseRepository


class DoorRepository(BaseRepository[Door]):
    model = Door


__all__ = ["DoorRepository"]
