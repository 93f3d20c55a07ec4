"""Common helpers for repository implementations."""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Any, ClassVar, Generic, TypeVar, cast

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

ModelT = TypeVar("ModelT")


class BaseRepository(Generic[ModelT]):
    """Session holder with the lookups every world table needs."""

    model: ClassVar[type[Any]]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add(self, instance: ModelT) -> ModelT:
        """Add model to session handling async mocks in tests."""
        add_result = cast(object, self.session.add(instance))
        if isinstance(add_result, Awaitable):
            await add_result
        await self.session.flush()
        return instance

    async def get(self, key: Any) -> ModelT | None:
        return cast("ModelT | None", await self.session.get(self.model, key))

    async def list_all(self) -> list[ModelT]:
        stmt = select(self.model).order_by(*self._ordering())
        result = await self.session.execute(stmt)
        return list(result.scalars().unique())

    async def list_ids(self) -> list[str]:
        mapper_pk = self.model.__mapper__.primary_key[0]
        result = await self.session.execute(select(mapper_pk).order_by(mapper_pk))
        return [str(value) for value in result.scalars()]

    async def delete(self, instance: ModelT) -> None:
        await self.session.delete(instance)
        await self.session.flush()

    def _ordering(self) -> tuple[Any, ...]:
        return tuple(self.model.__mapper__.primary_key)


__all__ = ["BaseRepository"]
