"""Pydantic schemas powering the /progress endpoint."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import field_validator

from fetch_legends.schemas.base import CamelModel


class CompletionResponse(CamelModel):
    challenge_id: str
    reward: Any = None
    completed_at: datetime

    @field_validator("completed_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # SQLite drops the offset on the way back; completions are always stored in UTC.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class ProgressResponse(CamelModel):
    completed: list[CompletionResponse]
    completed_count: int
    total_challenges: int


__all__ = ["CompletionResponse", "ProgressResponse"]
