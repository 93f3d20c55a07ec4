"""Public exports for Pydantic schemas."""

from __future__ import annotations

from .challenge import (
    Challenge,
    ChallengeDocument,
    ChallengeListResponse,
    ChallengeSummary,
    ExpectedRequest,
    PlayerRequest,
    ValidateChallengeRequest,
    ValidationResult,
)
from .door import DoorListResponse, DoorReplaceRequest, DoorResponse, DoorUpdateRequest
from .enemy import EnemyListResponse, EnemyResponse, EnemyUpdateRequest
from .inventory import InventoryAddRequest, InventoryEntryResponse, InventoryListResponse
from .item import (
    ItemCreateRequest,
    ItemListResponse,
    ItemReplaceRequest,
    ItemResponse,
    ItemUpdateRequest,
)
from .npc import NpcListResponse, NpcResponse, NpcUpdateRequest
from .player import PlayerReplaceRequest, PlayerResponse, PlayerUpdateRequest
from .progress import CompletionResponse, ProgressResponse
from .world import WorldSeed

__all__ = [
    "Challenge",
    "ChallengeDocument",
    "ChallengeListResponse",
    "ChallengeSummary",
    "CompletionResponse",
    "DoorListResponse",
    "DoorReplaceRequest",
    "DoorResponse",
    "DoorUpdateRequest",
    "EnemyListResponse",
    "EnemyResponse",
    "EnemyUpdateRequest",
    "ExpectedRequest",
    "InventoryAddRequest",
    "InventoryEntryResponse",
    "InventoryListResponse",
    "ItemCreateRequest",
    "ItemListResponse",
    "ItemReplaceRequest",
    "ItemResponse",
    "ItemUpdateRequest",
    "NpcListResponse",
    "NpcResponse",
    "NpcUpdateRequest",
    "PlayerReplaceRequest",
    "PlayerRequest",
    "PlayerResponse",
    "PlayerUpdateRequest",
    "ProgressResponse",
    "ValidateChallengeRequest",
    "ValidationResult",
    "WorldSeed",
]
