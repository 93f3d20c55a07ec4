"""Door model."""

from __future__ import annotations

from sqlalchemy import Boolean, CheckConstraint, String, text
from sqlalchemy.orm import Mapped, mapped_column

from fetch_legends.models.base import SLUG_LENGTH, Base


class Door(Base):
    """A door between two areas; only an unlocked door can be opened."""

    __tablename__ = "doors"

    id: Mapped[str] = mapped_column(String(SLUG_LENGTH), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    locked: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=text("1"),
    )
    open: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=text("0"),
    )
    leads_to: Mapped[str | None] = mapped_column(String(SLUG_LENGTH))

    __table_args__ = (CheckConstraint("NOT (locked AND open)", name="locked_door_closed"),)


__all__ = ["Door"]
