from __future__ import annotations

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from fetch_legends.repositories.progress import ProgressRepository
from fetch_legends.services.challenge_catalog import ChallengeCatalog
from fetch_legends.services.progress import ProgressService


@pytest.mark.asyncio
async def test_record_completion_stores_reward(
    db_session: AsyncSession, catalog: ChallengeCatalog
) -> None:
    service = ProgressService(ProgressRepository(db_session))
    challenge = catalog.get("unlock_door_1")
    assert challenge is not None

    completion = await service.record_completion(challenge)

    assert completion.challenge_id == "unlock_door_1"
    assert completion.reward == challenge.reward
    assert completion.completed_at is not None
    assert await service.completed_ids() == ["unlock_door_1"]


@pytest.mark.asyncio
async def test_record_completion_is_idempotent(
    db_session: AsyncSession, catalog: ChallengeCatalog
) -> None:
    service = ProgressService(ProgressRepository(db_session))
    challenge = catalog.get("look_around")
    assert challenge is not None

    first = await service.record_completion(challenge)
    second = await service.record_completion(challenge)

    assert second is first
    assert len(await service.list_completions()) == 1


@pytest.mark.asyncio
async def test_add_if_absent_ignores_duplicates(db_session: AsyncSession) -> None:
    repo = ProgressRepository(db_session)

    assert await repo.add_if_absent("look_around", "torch") is True
    assert await repo.add_if_absent("look_around", "something_else") is False

    completions = await repo.list_all()
    assert [(entry.challenge_id, entry.reward) for entry in completions] == [
        ("look_around", "torch")
    ]
