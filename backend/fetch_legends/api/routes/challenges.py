"""Challenge endpoints: browse authored challenges and validate attempts."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Request

from fetch_legends.api.dependencies import (
    get_catalog,
    get_challenge_validator,
    get_progress_service,
)
from fetch_legends.core.errors import (
    EXAMPLE_KEY,
    MethodNotAllowedError,
    allowed_methods_for_path,
)
from fetch_legends.core.logging import bind_log_fields, log_context
from fetch_legends.core.metrics import record_validation
from fetch_legends.schemas.challenge import (
    VALIDATE_SEGMENT,
    ChallengeListResponse,
    ChallengeSummary,
    ValidateChallengeRequest,
    ValidationResult,
)
from fetch_legends.services.challenge_catalog import ChallengeCatalog
from fetch_legends.services.challenge_validator import ChallengeValidator
from fetch_legends.services.progress import ProgressService

router = APIRouter(tags=["challenges"])

VALIDATE_EXAMPLE = {
    "challengeId": "unlock_door_1",
    "playerRequest": {
        "method": "PATCH",
        "path": "/doors/entrance",
        "body": {"locked": False},
    },
}


@router.get(
    "/challenges",
    response_model=ChallengeListResponse,
    summary="List challenges, optionally for one level",
)
async def list_challenges(
    catalog: Annotated[ChallengeCatalog, Depends(get_catalog)],
    level: Annotated[int | None, Query(ge=1, description="Only challenges of this level.")] = None,
) -> ChallengeListResponse:
    data = [ChallengeSummary.model_validate(c) for c in catalog.list_challenges(level)]
    return ChallengeListResponse(data=data)


@router.get(
    "/challenges/{challenge_id}",
    response_model=ChallengeSummary,
    summary="Fetch one challenge without its solution",
)
async def get_challenge(
    request: Request,
    challenge_id: Annotated[str, Path(description="Challenge identifier")],
    validator: Annotated[ChallengeValidator, Depends(get_challenge_validator)],
) -> ChallengeSummary:
    if challenge_id == VALIDATE_SEGMENT:
        path = request.url.path
        raise MethodNotAllowedError(
            request.method, path, allowed_methods_for_path(request.app, path)
        )
    return ChallengeSummary.model_validate(validator.get_challenge(challenge_id))


@router.post(
    "/challenges/validate",
    response_model=ValidationResult,
    response_model_exclude_none=True,
    summary="Check a hand-written HTTP call against a challenge",
    openapi_extra={EXAMPLE_KEY: VALIDATE_EXAMPLE},
)
async def validate_challenge(
    payload: ValidateChallengeRequest,
    validator: Annotated[ChallengeValidator, Depends(get_challenge_validator)],
    progress: Annotated[ProgressService, Depends(get_progress_service)],
) -> ValidationResult:
    with log_context(challenge_id=payload.challenge_id):
        result = validator.validate(payload.challenge_id, payload.player_request)
        outcome = "correct" if result.correct else str(result.failed_check)
        bind_log_fields(outcome=outcome)
        record_validation(payload.challenge_id, outcome)

        if result.correct:
            await progress.record_completion(validator.get_challenge(payload.challenge_id))
            await progress.session.commit()
    return result


__all__ = ["router"]
