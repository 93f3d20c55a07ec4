from __future__ import annotations

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_talk_to_the_sage(client: AsyncClient) -> None:
    response = await client.get("/api/npcs/old_sage")

    assert response.status_code == 200
    assert response.json() == {
        "id": "old_sage",
        "name": "Old Sage",
        "dialogue": "Every journey begins with a GET.",
        "mood": "friendly",
    }


@pytest.mark.asyncio
async def test_cheer_up_the_blacksmith(client: AsyncClient) -> None:
    response = await client.patch("/api/npcs/blacksmith", json={"mood": "friendly"})

    assert response.status_code == 200
    assert response.json()["mood"] == "friendly"
    listed = (await client.get("/api/npcs")).json()["data"]
    assert {npc["id"]: npc["mood"] for npc in listed}["blacksmith"] == "friendly"


@pytest.mark.asyncio
async def test_unknown_mood_is_rejected(client: AsyncClient) -> None:
    response = await client.patch("/api/npcs/blacksmith", json={"mood": "ecstatic"})

    assert response.status_code == 400
    assert "mood" in response.json()["hint"]


@pytest.mark.asyncio
async def test_wound_and_defeat_an_enemy(client: AsyncClient) -> None:
    wounded = await client.patch("/api/enemies/green_slime", json={"health": 3})
    assert wounded.status_code == 200
    assert wounded.json()["health"] == 3

    defeated = await client.delete("/api/enemies/green_slime")
    assert defeated.status_code == 204

    remaining = [enemy["id"] for enemy in (await client.get("/api/enemies")).json()["data"]]
    assert remaining == ["cave_bat"]


@pytest.mark.asyncio
async def test_unknown_enemy(client: AsyncClient) -> None:
    response = await client.get("/api/enemies/dragon")

    assert response.status_code == 404
    assert response.json() == {
        "error": "Enemy not found",
        "statusCode": 404,
        "hint": "Valid ids: cave_bat, green_slime",
    }


@pytest.mark.asyncio
async def test_npcs_cannot_be_deleted(client: AsyncClient) -> None:
    response = await client.delete("/api/npcs/old_sage")

    assert response.status_code == 405
    assert response.json()["hint"] == "Use GET or PATCH for /api/npcs/old_sage"
