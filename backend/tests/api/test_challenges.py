from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Any

import pytest
from httpx import AsyncClient

from fetch_legends.services.challenge_catalog import ChallengeCatalog

VALIDATE_URL = "/api/challenges/validate"


def _attempt(challenge_id: str, method: str, path: str, body: Any = None) -> dict[str, Any]:
    player_request: dict[str, Any] = {"method": method, "path": path}
    if body is not None:
        player_request["body"] = body
    return {"challengeId": challenge_id, "playerRequest": player_request}


@pytest.mark.asyncio
async def test_correct_attempt_returns_success_and_reward(client: AsyncClient) -> None:
    response = await client.post(
        VALIDATE_URL, json=_attempt("unlock_door_1", "PATCH", "/doors/entrance", {"locked": False})
    )

    assert response.status_code == 200
    assert response.json() == {
        "correct": True,
        "message": "Click! The entrance is unlocked.",
        "reward": "door_master_badge",
    }


@pytest.mark.asyncio
async def test_wrong_method_attempt(client: AsyncClient) -> None:
    response = await client.post(VALIDATE_URL, json=_attempt("unlock_door_1", "GET", "/doors/entrance"))

    assert response.status_code == 200
    payload = response.json()
    assert payload["correct"] is False
    assert payload["message"] == "Wrong HTTP method. Expected PATCH"
    assert payload["hints"]
    assert "reward" not in payload
    assert "failedCheck" not in payload


@pytest.mark.asyncio
async def test_wrong_path_attempt(client: AsyncClient) -> None:
    response = await client.post(
        VALIDATE_URL, json=_attempt("unlock_door_1", "PATCH", "/doors/exit", {"locked": False})
    )

    payload = response.json()
    assert payload["correct"] is False
    assert payload["message"] == "Incorrect endpoint path"


@pytest.mark.asyncio
async def test_wrong_body_attempt(client: AsyncClient) -> None:
    response = await client.post(
        VALIDATE_URL, json=_attempt("unlock_door_1", "PATCH", "/doors/entrance", {"locked": True})
    )

    payload = response.json()
    assert payload["correct"] is False
    assert payload["message"] == "Request body does not match expected format"


@pytest.mark.asyncio
async def test_body_key_order_does_not_matter(client: AsyncClient) -> None:
    body = {"value": 4, "kind": "tool", "name": "Wooden Shield", "id": "wooden_shield"}

    response = await client.post(VALIDATE_URL, json=_attempt("forge_shield", "POST", "/items", body))

    assert response.json()["correct"] is True


@pytest.mark.asyncio
async def test_unknown_challenge_is_not_found(client: AsyncClient) -> None:
    response = await client.post(VALIDATE_URL, json=_attempt("no_such_thing", "GET", "/items"))

    assert response.status_code == 404
    payload = response.json()
    assert payload["error"] == "Challenge not found"
    assert payload["statusCode"] == 404
    assert "unlock_door_1" in payload["hint"]


@pytest.mark.asyncio
async def test_malformed_validation_request_shows_example(client: AsyncClient) -> None:
    response = await client.post(VALIDATE_URL, json={"challengeId": "unlock_door_1"})

    assert response.status_code == 400
    payload = response.json()
    assert payload["error"] == "Malformed request"
    assert "playerRequest" in payload["hint"]
    assert '"challengeId": "unlock_door_1"' in payload["example"]


@pytest.mark.asyncio
async def test_validation_does_not_touch_the_world(client: AsyncClient) -> None:
    await client.post(
        VALIDATE_URL, json=_attempt("unlock_door_1", "PATCH", "/doors/entrance", {"locked": False})
    )

    door = (await client.get("/api/doors/entrance")).json()
    assert door["locked"] is True


@pytest.mark.asyncio
async def test_correct_attempts_are_recorded_once(client: AsyncClient) -> None:
    attempt = _attempt("look_around", "GET", "/items")
    await client.post(VALIDATE_URL, json=attempt)
    await client.post(VALIDATE_URL, json=attempt)
    await client.post(VALIDATE_URL, json=_attempt("inspect_sword", "GET", "/items/old_map"))

    progress = (await client.get("/api/progress")).json()

    assert progress["completedCount"] == 1
    assert [entry["challengeId"] for entry in progress["completed"]] == ["look_around"]
    assert progress["completed"][0]["reward"] == "torch"

    player = (await client.get("/api/player")).json()
    assert player["completedChallenges"] == ["look_around"]


@pytest.mark.asyncio
async def test_concurrent_correct_attempts_are_recorded_once(client: AsyncClient) -> None:
    attempt = _attempt("look_around", "GET", "/items")

    responses = await asyncio.gather(*(client.post(VALIDATE_URL, json=attempt) for _ in range(5)))

    assert [response.status_code for response in responses] == [200] * 5
    assert all(response.json()["correct"] is True for response in responses)
    progress = (await client.get("/api/progress")).json()
    assert progress["completedCount"] == 1


@pytest.mark.asyncio
async def test_completion_timestamp_is_utc(client: AsyncClient) -> None:
    await client.post(VALIDATE_URL, json=_attempt("look_around", "GET", "/items"))

    entry = (await client.get("/api/progress")).json()["completed"][0]

    completed_at = datetime.fromisoformat(entry["completedAt"])
    assert completed_at.utcoffset() is not None
    assert completed_at.utcoffset().total_seconds() == 0


@pytest.mark.asyncio
async def test_list_challenges_hides_solutions(
    client: AsyncClient, catalog: ChallengeCatalog
) -> None:
    response = await client.get("/api/challenges")

    assert response.status_code == 200
    data = response.json()["data"]
    assert [entry["id"] for entry in data] == catalog.ids()
    for entry in data:
        assert set(entry) == {"id", "level", "title", "description", "hint"}


@pytest.mark.asyncio
async def test_list_challenges_by_level(client: AsyncClient) -> None:
    response = await client.get("/api/challenges", params={"level": 1})

    levels = {entry["level"] for entry in response.json()["data"]}
    assert levels == {1}


@pytest.mark.asyncio
async def test_get_single_challenge(client: AsyncClient) -> None:
    response = await client.get("/api/challenges/unlock_door_1")

    assert response.status_code == 200
    payload = response.json()
    assert payload["title"] == "Unlock the entrance"
    assert "correctEndpoint" not in payload


@pytest.mark.asyncio
async def test_get_unknown_challenge(client: AsyncClient) -> None:
    response = await client.get("/api/challenges/missing")

    assert response.status_code == 404
    assert response.json()["error"] == "Challenge not found"


@pytest.mark.asyncio
async def test_progress_starts_empty(client: AsyncClient, catalog: ChallengeCatalog) -> None:
    response = await client.get("/api/progress")

    assert response.json() == {
        "completed": [],
        "completedCount": 0,
        "totalChallenges": len(catalog),
    }
