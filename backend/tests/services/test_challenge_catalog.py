from __future__ import annotations

import json
from pathlib import Path

import pytest

from fetch_legends.services.challenge_catalog import (
    ChallengeCatalog,
    ChallengeLoadError,
    load_catalog,
)


def _document(*challenges: dict[str, object]) -> str:
    return json.dumps({"challenges": list(challenges)})


def _raw_challenge(challenge_id: str, level: int) -> dict[str, object]:
    return {
        "id": challenge_id,
        "level": level,
        "title": challenge_id.title(),
        "description": "Do the thing.",
        "hint": "Think about verbs.",
        "correctEndpoint": {"method": "GET", "path": "/items"},
        "successMessage": "Done.",
    }


def test_packaged_catalog_loads(catalog: ChallengeCatalog) -> None:
    assert len(catalog) > 0
    assert "unlock_door_1" in catalog
    unlock = catalog.get("unlock_door_1")
    assert unlock is not None
    assert unlock.correct_endpoint.method == "PATCH"
    assert unlock.correct_endpoint.path == "/doors/entrance"
    assert unlock.correct_endpoint.body == {"locked": False}


def test_challenges_are_ordered_by_level_then_authoring_order() -> None:
    catalog = ChallengeCatalog.from_json(
        _document(
            _raw_challenge("second_level", 2),
            _raw_challenge("first_a", 1),
            _raw_challenge("first_b", 1),
        )
    )

    assert catalog.ids() == ["first_a", "first_b", "second_level"]
    assert [c.id for c in catalog.list_challenges(level=1)] == ["first_a", "first_b"]
    assert catalog.levels() == [1, 2]


def test_unknown_id_returns_none(catalog: ChallengeCatalog) -> None:
    assert catalog.get("missing") is None
    assert "missing" not in catalog


def test_duplicate_ids_are_rejected() -> None:
    with pytest.raises(ChallengeLoadError, match="duplicate challenge ids: twin"):
        ChallengeCatalog.from_json(_document(_raw_challenge("twin", 1), _raw_challenge("twin", 2)))


def test_lower_case_expected_method_is_rejected() -> None:
    raw = _raw_challenge("lazy", 1)
    raw["correctEndpoint"] = {"method": "get", "path": "/items"}

    with pytest.raises(ChallengeLoadError):
        ChallengeCatalog.from_json(_document(raw))


def test_load_catalog_reads_custom_file(tmp_path: Path) -> None:
    level_file = tmp_path / "levels.json"
    level_file.write_text(_document(_raw_challenge("custom", 1)), encoding="utf-8")

    catalog = load_catalog(level_file)

    assert catalog.ids() == ["custom"]


def test_missing_file_raises_load_error(tmp_path: Path) -> None:
    with pytest.raises(ChallengeLoadError, match="Cannot read level data"):
        ChallengeCatalog.from_path(tmp_path / "absent.json")


def test_validate_is_not_a_usable_challenge_id() -> None:
    with pytest.raises(ChallengeLoadError, match="'validate' is reserved"):
        ChallengeCatalog.from_json(_document(_raw_challenge("validate", 1)))
