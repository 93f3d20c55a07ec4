"""Health check endpoint."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fetch_legends import __version__
from fetch_legends.api.dependencies import get_catalog
from fetch_legends.core.db import get_session
from fetch_legends.services.challenge_catalog import ChallengeCatalog

router = APIRouter()


class HealthResponse(BaseModel):
    """Schema returned by the /health endpoint."""

    status: Literal["healthy", "unhealthy"]
    timestamp: datetime
    checks: dict[str, str]
    version: str = Field(default=__version__)


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    tags=["health"],
)
async def health(
    session: Annotated[AsyncSession, Depends(get_session)],
    catalog: Annotated[ChallengeCatalog, Depends(get_catalog)],
) -> HealthResponse:
    """Return the current application health snapshot."""

    checks = {
        "database": await _ping_database(session),
        "challenges": "ok" if len(catalog) else "empty",
    }
    healthy = all(value == "ok" for value in checks.values())
    return HealthResponse(
        status="healthy" if healthy else "unhealthy",
        timestamp=datetime.now(tz=timezone.utc),
        checks=checks,
        version=__version__,
    )


async def _ping_database(session: AsyncSession) -> str:
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        return "error"
    return "ok"


__all__ = ["HealthResponse", "router"]
