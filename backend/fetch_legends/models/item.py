"""Item model: things lying around the world that can be picked up."""

from __future__ import annotations

import enum

from sqlalchemy import Enum, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from fetch_legends.models.base import SLUG_LENGTH, Base


class ItemKind(str, enum.Enum):
    """Supported item categories."""

    WEAPON = "weapon"
    KEY = "key"
    POTION = "potion"
    TOOL = "tool"
    JUNK = "junk"


class Item(Base):
    """An item placed in the world by level data or created by the player."""

    __tablename__ = "items"

    id: Mapped[str] = mapped_column(String(SLUG_LENGTH), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    kind: Mapped[ItemKind] = mapped_column(
        Enum(ItemKind, name="item_kind_enum", native_enum=False, validate_strings=True),
        nullable=False,
        default=ItemKind.JUNK,
    )
    value: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )


__all__ = ["Item", "ItemKind"]
