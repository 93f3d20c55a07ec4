"""Business logic for enemies."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from fetch_legends.core.errors import NotFoundError
from fetch_legends.models.enemy import Enemy
from fetch_legends.repositories.enemy import EnemyRepository
from fetch_legends.schemas.enemy import EnemyUpdateRequest

logger = logging.getLogger("fetch_legends.services.enemies")


class EnemyService:
    def __init__(self, enemy_repo: EnemyRepository) -> None:
        self.enemy_repo = enemy_repo

    @property
    def session(self) -> AsyncSession:
        return self.enemy_repo.session

    async def list_enemies(self) -> list[Enemy]:
        return await self.enemy_repo.list_all()

    async def get_enemy(self, enemy_id: str) -> Enemy:
        enemy = await self.enemy_repo.get(enemy_id)
        if enemy is None:
            raise NotFoundError.for_resource("Enemy", await self.enemy_repo.list_ids())
        return enemy

    async def update_enemy(self, enemy_id: str, payload: EnemyUpdateRequest) -> Enemy:
        enemy = await self.get_enemy(enemy_id)
        enemy.health = payload.health
        await self.session.flush()
        return enemy

    async def defeat_enemy(self, enemy_id: str) -> None:
        enemy = await self.get_enemy(enemy_id)
        await self.enemy_repo.delete(enemy)
        logger.info("Enemy defeated", extra={"enemy_id": enemy_id})


__all__ = ["EnemyService"]
