"""Challenge completion records kept by the progress recorder."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from fetch_legends.models.base import SLUG_LENGTH, Base


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class ChallengeCompletion(Base):
    """First successful solve of a challenge and the reward it granted."""

    __tablename__ = "challenge_completions"

    challenge_id: Mapped[str] = mapped_column(String(SLUG_LENGTH), primary_key=True)
    reward: Mapped[Any] = mapped_column(JSON)
    completed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )


__all__ = ["ChallengeCompletion"]
