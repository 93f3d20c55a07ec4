"""Records which challenges the player has solved.

Called by the HTTP layer after a correct validation; the validator itself
never touches storage.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from fetch_legends.models.progress import ChallengeCompletion
from fetch_legends.repositories.progress import ProgressRepository
from fetch_legends.schemas.challenge import Challenge

logger = logging.getLogger("fetch_legends.services.progress")


class ProgressService:
    def __init__(self, progress_repo: ProgressRepository) -> None:
        self.progress_repo = progress_repo

    @property
    def session(self) -> AsyncSession:
        return self.progress_repo.session

    async def record_completion(self, challenge: Challenge) -> ChallengeCompletion:
        """Store the first completion of ``challenge``; later solves return the stored one."""
        inserted = await self.progress_repo.add_if_absent(challenge.id, challenge.reward)
        completion = await self.progress_repo.get(challenge.id)
        if completion is None:
            raise RuntimeError(f"Completion for {challenge.id} vanished after insert")
        if inserted:
            logger.info(
                "Challenge completed",
                extra={"challenge_id": challenge.id, "reward": challenge.reward},
            )
        return completion

    async def list_completions(self) -> list[ChallengeCompletion]:
        return await self.progress_repo.list_all()

    async def completed_ids(self) -> list[str]:
        return [completion.challenge_id for completion in await self.list_completions()]


__all__ = ["ProgressService"]
