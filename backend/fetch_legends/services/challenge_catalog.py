"""Read-only catalog of authored challenges loaded from level data."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Protocol

from pydantic import ValidationError

from fetch_legends.core.config import settings
from fetch_legends.schemas.challenge import Challenge, ChallengeDocument

logger = logging.getLogger("fetch_legends.services.challenges")

DEFAULT_CHALLENGES_RESOURCE = "challenges.json"


class ChallengeLoadError(RuntimeError):
    """Raised when level data cannot be read or does not validate."""


class ChallengeLookup(Protocol):
    """What the validator needs from a challenge source."""

    def get(self, challenge_id: str) -> Challenge | None: ...

    def ids(self) -> list[str]: ...


class ChallengeCatalog:
    """Challenges indexed by id, ordered by level then authoring order."""

    def __init__(self, challenges: Iterable[Challenge]) -> None:
        ordered = sorted(challenges, key=lambda challenge: challenge.level)
        by_id: dict[str, Challenge] = {}
        for challenge in ordered:
            if challenge.id in by_id:
                raise ValueError(f"Duplicate challenge id: {challenge.id}")
            by_id[challenge.id] = challenge
        self._by_id = MappingProxyType(by_id)

    @classmethod
    def from_json(cls, raw: str | bytes, *, source: str = "<memory>") -> "ChallengeCatalog":
        try:
            document = ChallengeDocument.model_validate_json(raw)
        except ValidationError as exc:
            raise ChallengeLoadError(f"Invalid level data in {source}: {exc}") from exc
        return cls(document.challenges)

    @classmethod
    def from_path(cls, path: Path) -> "ChallengeCatalog":
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise ChallengeLoadError(f"Cannot read level data {path}: {exc}") from exc
        return cls.from_json(raw, source=str(path))

    @classmethod
    def from_package(cls) -> "ChallengeCatalog":
        resource = resources.files("fetch_legends") / "data" / DEFAULT_CHALLENGES_RESOURCE
        return cls.from_json(resource.read_bytes(), source=DEFAULT_CHALLENGES_RESOURCE)

    def get(self, challenge_id: str) -> Challenge | None:
        return self._by_id.get(challenge_id)

    def ids(self) -> list[str]:
        return list(self._by_id)

    def list_challenges(self, level: int | None = None) -> list[Challenge]:
        challenges = self._by_id.values()
        if level is None:
            return list(challenges)
        return [challenge for challenge in challenges if challenge.level == level]

    def levels(self) -> list[int]:
        return sorted({challenge.level for challenge in self._by_id.values()})

    def __contains__(self, challenge_id: object) -> bool:
        return challenge_id in self._by_id

    def __iter__(self) -> Iterator[Challenge]:
        return iter(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)


def load_catalog(path: Path | None = None) -> ChallengeCatalog:
    """Load ``path`` when given, otherwise the level data shipped with the package."""
    catalog = ChallengeCatalog.from_path(path) if path else ChallengeCatalog.from_package()
    logger.info(
        "Challenge catalog loaded",
        extra={
            "challenge_count": len(catalog),
            "levels": catalog.levels(),
            "source": str(path) if path else DEFAULT_CHALLENGES_RESOURCE,
        },
    )
    return catalog


@lru_cache
def get_challenge_catalog() -> ChallengeCatalog:
    """Return the process-wide catalog, loaded once on first use."""
    return load_catalog(settings.challenges_file)


__all__ = [
    "ChallengeCatalog",
    "ChallengeLoadError",
    "ChallengeLookup",
    "get_challenge_catalog",
    "load_catalog",
]
