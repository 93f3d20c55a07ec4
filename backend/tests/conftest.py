from __future__ import annotations

import os
from collections.abc import AsyncIterator
from typing import Final

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

_TEST_ENV_VARS: Final[dict[str, str]] = {
    "APP_ENV": "test",
    "DATABASE_URL": "sqlite+aiosqlite:///:memory:",
    "SEED_WORLD": "false",
    "API_PREFIX": "/api",
}

for key, value in _TEST_ENV_VARS.items():
    os.environ.setdefault(key, value)

from fetch_legends.core.db import get_session, session_dependency  # noqa: E402
from fetch_legends.main import app  # noqa: E402
from fetch_legends.models.base import Base  # noqa: E402
from fetch_legends.services.challenge_catalog import ChallengeCatalog  # noqa: E402
from fetch_legends.services.world_seed import seed_world  # noqa: E402


@pytest_asyncio.fixture()
async def test_engine() -> AsyncIterator[AsyncEngine]:
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture()
def session_factory(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(test_engine, expire_on_commit=False)


@pytest_asyncio.fixture()
async def empty_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture()
async def db_session(empty_session: AsyncSession) -> AsyncSession:
    await seed_world(empty_session)
    await empty_session.commit()
    return empty_session


@pytest_asyncio.fixture()
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncClient]:
    async with session_factory() as session:
        await seed_world(session)
        await session.commit()

    # Every request opens its own session, the same way the app does in production.
    app.dependency_overrides[get_session] = session_dependency(session_factory, serialize=True)
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://testserver") as http_client:
            yield http_client
    finally:
        app.dependency_overrides.pop(get_session, None)


@pytest.fixture()
def catalog() -> ChallengeCatalog:
    return ChallengeCatalog.from_package()
