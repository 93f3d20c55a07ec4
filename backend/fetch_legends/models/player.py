"""Player model. The game is single player, so the table holds one row."""

from __future__ import annotations

from sqlalchemy import Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from fetch_legends.models.base import Base

PLAYER_ID = 1


class Player(Base):
    __tablename__ = "players"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=PLAYER_ID)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    health: Mapped[int] = mapped_column(Integer, nullable=False)
    max_health: Mapped[int] = mapped_column(Integer, nullable=False)
    level: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=1,
        server_default=text("1"),
    )
    gold: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )


__all__ = ["PLAYER_ID", "Player"]
