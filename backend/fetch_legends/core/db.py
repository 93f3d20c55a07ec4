"""Database engine and session configuration."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncGenerator, Callable
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from fetch_legends.core.config import settings
from fetch_legends.models import Base


def _build_engine() -> AsyncEngine:
    options: dict[str, Any] = {"echo": settings.debug}
    if settings.is_memory_database:
        # One shared connection, otherwise every session sees its own empty database.
        options["connect_args"] = {"check_same_thread": False}
        options["poolclass"] = StaticPool
    else:
        options["pool_pre_ping"] = True
    return create_async_engine(settings.database_url, **options)


engine: AsyncEngine = _build_engine()
AsyncSessionFactory = async_sessionmaker(engine, expire_on_commit=False)


SessionDependency = Callable[[], AsyncGenerator[AsyncSession, None]]


def session_dependency(
    factory: async_sessionmaker[AsyncSession], *, serialize: bool
) -> SessionDependency:
    """Build a FastAPI dependency that yields one AsyncSession per request.

    With ``serialize`` the sessions take turns: an in-memory database lives on a
    single shared connection, so two overlapping transactions would interleave
    on it.
    """

    lock = asyncio.Lock() if serialize else None

    async def _session() -> AsyncGenerator[AsyncSession, None]:
        if lock is None:
            async with factory() as session:
                yield session
            return
        async with lock:
            async with factory() as session:
                yield session

    return _session


get_session = session_dependency(AsyncSessionFactory, serialize=settings.is_memory_database)


async def create_schema(target: AsyncEngine | None = None) -> None:
    """Create every world table that does not exist yet."""

    async with (target or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """Close the global engine (used in application shutdown hooks or tests)."""

    await engine.dispose()


__all__ = [
    "AsyncSessionFactory",
    "SessionDependency",
    "create_schema",
    "dispose_engine",
    "engine",
    "get_session",
    "session_dependency",
]
