"""FastAPI application factory and entrypoint."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fetch_legends import __version__
from fetch_legends.api.routes import api_router, root_router
from fetch_legends.core.config import settings
from fetch_legends.core.db import AsyncSessionFactory, create_schema, dispose_engine
from fetch_legends.core.errors import register_exception_handlers
from fetch_legends.core.logging import configure_logging
from fetch_legends.core.metrics import setup_metrics
from fetch_legends.core.middleware import (
    AccessLogMiddleware,
    RequestIDMiddleware,
    RequestSizeLimitMiddleware,
)
from fetch_legends.services.challenge_catalog import get_challenge_catalog
from fetch_legends.services.world_seed import seed_world

ALLOWED_METHODS = ["GET", "POST", "PATCH", "PUT", "DELETE", "OPTIONS"]
ALLOWED_HEADERS = ["Content-Type", "Accept", "X-Request-ID"]

configure_logging(settings.log_level)

logger = logging.getLogger("fetch_legends.main")


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""

    application = FastAPI(
        title=settings.project_name,
        debug=settings.debug,
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    register_exception_handlers(application)

    if settings.cors_origins:
        application.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=False,
            allow_methods=ALLOWED_METHODS,
            allow_headers=ALLOWED_HEADERS,
            max_age=86400,
        )

    setup_metrics(application)

    application.add_middleware(AccessLogMiddleware)
    application.add_middleware(
        RequestSizeLimitMiddleware,
        max_request_bytes=settings.max_request_bytes,
    )
    application.add_middleware(RequestIDMiddleware)

    application.include_router(root_router)
    application.include_router(api_router)

    @application.on_event("startup")
    async def _prepare_world() -> None:
        # Fail fast on broken level data instead of on the first request.
        get_challenge_catalog()
        if not settings.seed_world:
            return
        await create_schema()
        async with AsyncSessionFactory() as session:
            if await seed_world(session):
                await session.commit()
        logger.info("World ready", extra={"database_url": settings.database_url})

    @application.on_event("shutdown")
    async def _dispose_database() -> None:
        await dispose_engine()

    return application


app = create_app()

__all__ = ["app", "create_app"]
