"""Repository for the single player row."""

from __future__ import annotations

from fetch_legends.models.player import PLAYER_ID, Player
from fetch_legends.repositories.base import BaseRepository


class PlayerRepository(BaseRepository[Player]):
    model = Player

    async def get_player(self) -> Player | None:
        return await self.get(PLAYER_ID)


__all__ = ["PlayerRepository"]
