"""Repository for items."""

from __future__ import annotations

from fetch_legends.models.item import Item
from fetch_legends.repositories.base import BaseRepository


class ItemRepository(BaseRepository[Item]):
    model = Item


__all__ = ["ItemRepository"]
