from __future__ import annotations

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_get_player(client: AsyncClient) -> None:
    response = await client.get("/api/player")

    assert response.status_code == 200
    assert response.json() == {
        "name": "Hero",
        "health": 60,
        "maxHealth": 100,
        "level": 1,
        "gold": 5,
        "completedChallenges": [],
    }


@pytest.mark.asyncio
async def test_drink_potion_clamps_health(client: AsyncClient) -> None:
    response = await client.patch("/api/player", json={"health": 500})

    assert response.status_code == 200
    assert response.json()["health"] == 100


@pytest.mark.asyncio
async def test_become_legend(client: AsyncClient) -> None:
    body = {"name": "Legend", "health": 100, "maxHealth": 100, "level": 2, "gold": 5}

    response = await client.put("/api/player", json=body)

    assert response.status_code == 200
    payload = response.json()
    assert payload["name"] == "Legend"
    assert payload["level"] == 2


@pytest.mark.asyncio
async def test_player_put_requires_every_field(client: AsyncClient) -> None:
    response = await client.put("/api/player", json={"name": "Legend"})

    assert response.status_code == 400
    payload = response.json()
    assert payload["error"] == "Malformed request"
    assert "maxHealth" in payload["hint"]
    assert '"maxHealth": 100' in payload["example"]


@pytest.mark.asyncio
async def test_player_cannot_be_deleted(client: AsyncClient) -> None:
    response = await client.delete("/api/player")

    assert response.status_code == 405
    assert response.json()["hint"] == "Use GET, PATCH or PUT for /api/player"


@pytest.mark.asyncio
async def test_patch_with_only_nulls_is_bad_request(client: AsyncClient) -> None:
    response = await client.patch("/api/player", json={"health": None})

    assert response.status_code == 400
    assert response.json()["error"] == "Malformed request"

    player = (await client.get("/api/player")).json()
    assert player["health"] == 60
