"""Tests for main application module."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from fetch_legends import __version__
from fetch_legends.core.config import settings
from fetch_legends.main import app


def test_app_title_and_version() -> None:
    assert app.title == settings.project_name
    assert app.version == __version__


def test_app_has_exception_handlers() -> None:
    assert len(app.exception_handlers) > 0


def test_app_has_routers() -> None:
    routes = {getattr(route, "path", None) for route in app.routes}

    assert "/health" in routes
    assert "/metrics" in routes
    assert "/api/challenges/validate" in routes
    assert "/api/doors/{door_id}" in routes
    assert "/api/player" in routes


@pytest.mark.asyncio
async def test_openapi_schema() -> None:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        response = await client.get("/openapi.json")

    assert response.status_code == 200
    schema = response.json()
    assert "/api/challenges/validate" in schema["paths"]
