"""Repository for challenge completions."""

from __future__ import annotations

from typing import Any

from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from fetch_legends.models.progress import ChallengeCompletion
from fetch_legends.repositories.base import BaseRepository


class ProgressRepository(BaseRepository[ChallengeCompletion]):
    model = ChallengeCompletion

    async def add_if_absent(self, challenge_id: str, reward: Any) -> bool:
        """Insert a completion unless one exists; return whether a row was written.

        Runs as a single ``INSERT ... ON CONFLICT DO NOTHING`` so two solves of the
        same challenge can never both pass an existence check and collide.
        """
        stmt = (
            sqlite_insert(ChallengeCompletion)
            .values(challenge_id=challenge_id, reward=reward)
            .on_conflict_do_nothing(index_elements=[ChallengeCompletion.challenge_id])
        )
        result = await self.session.execute(stmt)
        return bool(result.rowcount)

    def _ordering(self) -> tuple[Any, ...]:
        return (ChallengeCompletion.completed_at.asc(), ChallengeCompletion.challenge_id.asc())


__all__ = ["ProgressRepository"]
