"""Compare a player's hand-written HTTP call with the call a challenge expects.

Checks run in a fixed order and stop at the first mismatch:

1. method, exact and case-sensitive;
2. path, exact (no query-string awareness, no case folding);
3. body, only when the challenge defines one, by structural equality.

The validator holds no mutable state. The same arguments always produce the
same result, so it is safe to share one instance between concurrent requests.
"""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Iterable
from typing import Any, Final

from fetch_legends.core.errors import NotFoundError
from fetch_legends.schemas.challenge import (
    Challenge,
    FailedCheck,
    PlayerRequest,
    ValidationResult,
)
from fetch_legends.services.challenge_catalog import ChallengeLookup

logger = logging.getLogger("fetch_legends.services.validator")

WRONG_METHOD_MESSAGE: Final[str] = "Wrong HTTP method. Expected {method}"
WRONG_PATH_MESSAGE: Final[str] = "Incorrect endpoint path"
WRONG_BODY_MESSAGE: Final[str] = "Request body does not match expected format"

VERB_HINTS: Final[dict[str, str]] = {
    "GET": "GET reads a resource without changing it.",
    "POST": "POST creates something new inside a collection.",
    "PUT": "PUT replaces a whole resource, so send every field.",
    "PATCH": "PATCH changes only the fields you send.",
    "DELETE": "DELETE removes the resource at that path.",
}


class ChallengeNotFoundError(NotFoundError):
    """Raised for an id the challenge lookup does not know."""

    def __init__(self, challenge_id: str, known_ids: Iterable[str]) -> None:
        ids = sorted(known_ids)
        hint = f"Valid challenge ids: {', '.join(ids)}" if ids else "No challenges are loaded."
        super().__init__("Challenge not found", hint=hint)
        self.challenge_id = challenge_id


def bodies_match(expected: Any, submitted: Any) -> bool:
    """JSON structural equality.

    Object key order is ignored, array order is not, booleans never equal
    numbers and ``1`` equals ``1.0`` because JSON has a single number type.
    """
    if isinstance(expected, bool) or isinstance(submitted, bool):
        return isinstance(expected, bool) and isinstance(submitted, bool) and expected == submitted
    if isinstance(expected, dict):
        if not isinstance(submitted, dict) or expected.keys() != submitted.keys():
            return False
        return all(bodies_match(value, submitted[key]) for key, value in expected.items())
    if isinstance(expected, list):
        if not isinstance(submitted, list) or len(expected) != len(submitted):
            return False
        return all(bodies_match(left, right) for left, right in zip(expected, submitted))
    if isinstance(expected, (int, float)) and isinstance(submitted, (int, float)):
        return expected == submitted
    return type(expected) is type(submitted) and expected == submitted


def render_body(body: Any) -> str:
    """Canonical JSON text of a body, used in hints."""
    return json.dumps(body, sort_keys=True, ensure_ascii=False)


class ChallengeValidator:
    """Stateless checker bound to a challenge lookup."""

    def __init__(self, challenges: ChallengeLookup) -> None:
        self.challenges = challenges

    def get_challenge(self, challenge_id: str) -> Challenge:
        challenge = self.challenges.get(challenge_id)
        if challenge is None:
            raise ChallengeNotFoundError(challenge_id, self.challenges.ids())
        return challenge

    def validate(self, challenge_id: str, player_request: PlayerRequest) -> ValidationResult:
        """Return whether ``player_request`` solves the challenge, with hints when it does not.

        Raises ChallengeNotFoundError for an unknown ``challenge_id``.
        """
        challenge = self.get_challenge(challenge_id)
        result = self._compare(challenge, player_request)
        logger.info(
            "Challenge validated",
            extra={
                "challenge_id": challenge.id,
                "correct": result.correct,
                "failed_check": result.failed_check,
                "submitted_method": player_request.method,
                "submitted_path": player_request.path,
            },
        )
        return result

    def _compare(self, challenge: Challenge, player_request: PlayerRequest) -> ValidationResult:
        expected = challenge.correct_endpoint

        if player_request.method != expected.method:
            hints = [challenge.hint]
            if player_request.method.upper() == expected.method:
                hints.append("HTTP methods are written in upper case.")
            verb_hint = VERB_HINTS.get(expected.method)
            if verb_hint:
                hints.append(verb_hint)
            return self._failure(
                "method",
                WRONG_METHOD_MESSAGE.format(method=expected.method),
                hints,
            )

        if player_request.path != expected.path:
            return self._failure(
                "path",
                WRONG_PATH_MESSAGE,
                self._path_hints(expected.path, player_request.path),
            )

        if expected.has_body and not bodies_match(expected.body, player_request.body):
            hints = [f"Expected body: {render_body(expected.body)}"]
            if player_request.body is None:
                hints.insert(0, "This call needs a JSON body.")
            return self._failure("body", WRONG_BODY_MESSAGE, hints)

        return ValidationResult(
            correct=True,
            message=challenge.success_message,
            reward=copy.deepcopy(challenge.reward),
        )

    @staticmethod
    def _path_hints(expected: str, submitted: str) -> list[str]:
        hints = [f"Expected path: {expected}"]
        if "?" in submitted:
            hints.append("Query parameters are not part of this challenge.")
        elif submitted.lower() == expected.lower():
            hints.append("Paths are case-sensitive.")
        elif submitted.rstrip("/") == expected.rstrip("/"):
            hints.append("Watch the trailing slash.")
        elif not submitted.startswith("/"):
            hints.append("Paths start with '/'.")
        return hints

    @staticmethod
    def _failure(check: FailedCheck, message: str, hints: list[str]) -> ValidationResult:
        return ValidationResult(correct=False, message=message, hints=hints, failed_check=check)


__all__ = [
    "ChallengeNotFoundError",
    "ChallengeValidator",
    "VERB_HINTS",
    "WRONG_BODY_MESSAGE",
    "WRONG_METHOD_MESSAGE",
    "WRONG_PATH_MESSAGE",
    "bodies_match",
    "render_body",
]
