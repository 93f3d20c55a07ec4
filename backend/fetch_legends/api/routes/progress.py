"""Progress endpoint: which challenges have been solved."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from fetch_legends.api.dependencies import get_catalog, get_progress_service
from fetch_legends.schemas.progress import CompletionResponse, ProgressResponse
from fetch_legends.services.challenge_catalog import ChallengeCatalog
from fetch_legends.services.progress import ProgressService

router = APIRouter(tags=["progress"])


@router.get("/progress", response_model=ProgressResponse, summary="Solved challenges and rewards")
async def get_progress(
    progress: Annotated[ProgressService, Depends(get_progress_service)],
    catalog: Annotated[ChallengeCatalog, Depends(get_catalog)],
) -> ProgressResponse:
    completions = await progress.list_completions()
    return ProgressResponse(
        completed=[CompletionResponse.model_validate(c) for c in completions],
        completed_count=len(completions),
        total_challenges=len(catalog),
    )


__all__ = ["router"]
