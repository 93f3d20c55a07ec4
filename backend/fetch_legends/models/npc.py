"""Non-player character model."""

from __future__ import annotations

import enum

from sqlalchemy import Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from fetch_legends.models.base import SLUG_LENGTH, Base


class NpcMood(str, enum.Enum):
    FRIENDLY = "friendly"
    NEUTRAL = "neutral"
    GRUMPY = "grumpy"


class Npc(Base):
    __tablename__ = "npcs"

    id: Mapped[str] = mapped_column(String(SLUG_LENGTH), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    dialogue: Mapped[str] = mapped_column(Text, nullable=False, default="")
    mood: Mapped[NpcMood] = mapped_column(
        Enum(NpcMood, name="npc_mood_enum", native_enum=False, validate_strings=True),
        nullable=False,
        default=NpcMood.NEUTRAL,
    )


__all__ = ["Npc", "NpcMood"]
