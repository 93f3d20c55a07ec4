"""Pydantic schemas for authored challenges and their validation."""

from __future__ import annotations

from typing import Any, Final, Literal

from pydantic import ConfigDict, Field, field_validator, model_validator

from fetch_legends.schemas.base import CamelModel, Slug

HTTP_METHODS: Final[frozenset[str]] = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})

# Literal segment of POST /challenges/validate, so never usable as a challenge id.
VALIDATE_SEGMENT: Final[str] = "validate"

FailedCheck = Literal["method", "path", "body"]


class ExpectedRequest(CamelModel):
    """The exact call that solves a challenge."""

    model_config = ConfigDict(frozen=True)

    method: str
    path: str
    body: Any = None

    @field_validator("method")
    @classmethod
    def _validate_method(cls, value: str) -> str:
        if value not in HTTP_METHODS:
            allowed = ", ".join(sorted(HTTP_METHODS))
            raise ValueError(f"method must be one of {allowed} (upper case), got {value!r}")
        return value

    @field_validator("path")
    @classmethod
    def _validate_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("path must start with '/'")
        return value

    @property
    def has_body(self) -> bool:
        return self.body is not None


class Challenge(CamelModel):
    """An authored puzzle; immutable once loaded."""

    model_config = ConfigDict(frozen=True)

    id: Slug
    level: int = Field(ge=1)
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    hint: str = Field(min_length=1)
    correct_endpoint: ExpectedRequest
    success_message: str = Field(min_length=1)
    reward: Any = None


class ChallengeDocument(CamelModel):
    """Level data file: ``{"challenges": [...]}``."""

    challenges: list[Challenge]

    @model_validator(mode="after")
    def _reject_duplicate_ids(self) -> "ChallengeDocument":
        seen: set[str] = set()
        duplicates: set[str] = set()
        for challenge in self.challenges:
            if challenge.id in seen:
                duplicates.add(challenge.id)
            seen.add(challenge.id)
        if duplicates:
            raise ValueError(f"duplicate challenge ids: {', '.join(sorted(duplicates))}")
        if VALIDATE_SEGMENT in seen:
            raise ValueError(f"challenge id {VALIDATE_SEGMENT!r} is reserved")
        return self


class PlayerRequest(CamelModel):
    """The call a player typed into the in-game editor."""

    method: str = Field(min_length=1)
    path: str = Field(min_length=1)
    body: Any = None


class ValidateChallengeRequest(CamelModel):
    """Request body for POST /challenges/validate."""

    challenge_id: str = Field(min_length=1)
    player_request: PlayerRequest


class ValidationResult(CamelModel):
    """Outcome of comparing a PlayerRequest with a challenge."""

    correct: bool
    message: str | None = None
    hints: list[str] | None = None
    reward: Any = None
    failed_check: FailedCheck | None = Field(default=None, exclude=True)


class ChallengeSummary(CamelModel):
    """Public view of a challenge; never reveals the expected call."""

    id: str
    level: int
    title: str
    description: str
    hint: str


class ChallengeListResponse(CamelModel):
    data: list[ChallengeSummary]


__all__ = [
    "Challenge",
    "ChallengeDocument",
    "ChallengeListResponse",
    "ChallengeSummary",
    "ExpectedRequest",
    "FailedCheck",
    "HTTP_METHODS",
    "PlayerRequest",
    "VALIDATE_SEGMENT",
    "ValidateChallengeRequest",
    "ValidationResult",
]
