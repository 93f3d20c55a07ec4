"""Enemy model."""

from __future__ import annotations

from sqlalchemy import Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from fetch_legends.models.base import SLUG_LENGTH, Base


class Enemy(Base):
    """A hostile creature; deleting it means it was defeated."""

    __tablename__ = "enemies"

    id: Mapped[str] = mapped_column(String(SLUG_LENGTH), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    health: Mapped[int] = mapped_column(Integer, nullable=False)
    damage: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=1,
        server_default=text("1"),
    )


__all__ = ["Enemy"]
