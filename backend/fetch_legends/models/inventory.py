"""Inventory model: stacks of items carried by the player."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fetch_legends.models.base import SLUG_LENGTH, Base
from fetch_legends.models.item import Item


class InventoryEntry(Base):
    """One stack of an item in the player's bag."""

    __tablename__ = "inventory"

    item_id: Mapped[str] = mapped_column(
        String(SLUG_LENGTH),
        ForeignKey("items.id", ondelete="CASCADE"),
        primary_key=True,
    )
    quantity: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=1,
        server_default=text("1"),
    )

    item: Mapped[Item] = relationship(lazy="joined", innerjoin=True)


__all__ = ["InventoryEntry"]
