"""Shared FastAPI dependency builders."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fetch_legends.core.db import get_session
from fetch_legends.repositories.progress import ProgressRepository
from fetch_legends.services.challenge_catalog import ChallengeCatalog, get_challenge_catalog
from fetch_legends.services.challenge_validator import ChallengeValidator
from fetch_legends.services.progress import ProgressService


def get_catalog() -> ChallengeCatalog:
    """Return the process-wide challenge catalog."""
    return get_challenge_catalog()


def get_challenge_validator(
    catalog: Annotated[ChallengeCatalog, Depends(get_catalog)],
) -> ChallengeValidator:
    return ChallengeValidator(catalog)


async def get_progress_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ProgressService:
    return ProgressService(ProgressRepository(session))


__all__ = ["get_catalog", "get_challenge_validator", "get_progress_service"]
