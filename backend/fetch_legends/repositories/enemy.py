"""Repository for enemies."""

from __future__ import annotations

from fetch_legends.models.enemy import Enemy
from fetch_legends.repositories.base import BaseRepository


class EnemyRepository(BaseRepository[Enemy]):
    model = Enemy


__all__ = ["EnemyRepository"]
