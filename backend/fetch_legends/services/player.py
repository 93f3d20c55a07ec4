"""Business logic for the single player character."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from fetch_legends.core.errors import NotFoundError
from fetch_legends.models.player import Player
from fetch_legends.repositories.player import PlayerRepository
from fetch_legends.schemas.player import PlayerReplaceRequest, PlayerUpdateRequest


class PlayerService:
    """Read and change the player; health never leaves ``[0, max_health]``."""

    def __init__(self, player_repo: PlayerRepository) -> None:
        self.player_repo = player_repo

    @property
    def session(self) -> AsyncSession:
        return self.player_repo.session

    async def get_player(self) -> Player:
        player = await self.player_repo.get_player()
        if player is None:
            raise NotFoundError("Player not found", hint="The world has not been seeded yet.")
        return player

    async def update_player(self, payload: PlayerUpdateRequest) -> Player:
        player = await self.get_player()
        if payload.name is not None:
            player.name = payload.name
        if payload.max_health is not None:
            player.max_health = payload.max_health
        if payload.health is not None:
            player.health = payload.health
        if payload.level is not None:
            player.level = payload.level
        if payload.gold is not None:
            player.gold = payload.gold
        player.health = _clamp(player.health, player.max_health)
        await self.session.flush()
        return player

    async def replace_player(self, payload: PlayerReplaceRequest) -> Player:
        player = await self.get_player()
        player.name = payload.name
        player.max_health = payload.max_health
        player.health = _clamp(payload.health, payload.max_health)
        player.level = payload.level
        player.gold = payload.gold
        await self.session.flush()
        return player


def _clamp(health: int, max_health: int) -> int:
    return max(0, min(health, max_health))


__all__ = ["PlayerService"]
