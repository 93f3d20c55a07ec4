"""Business logic services orchestrating domain operations."""

from fetch_legends.services.challenge_catalog import ChallengeCatalog, get_challenge_catalog
from fetch_legends.services.challenge_validator import ChallengeNotFoundError, ChallengeValidator
from fetch_legends.services.door import DoorService
from fetch_legends.services.enemy import EnemyService
from fetch_legends.services.inventory import InventoryService
from fetch_legends.services.item import ItemService
from fetch_legends.services.npc import NpcService
from fetch_legends.services.player import PlayerService
from fetch_legends.services.progress import ProgressService
from fetch_legends.services.world_seed import seed_world

__all__ = [
    "ChallengeCatalog",
    "ChallengeNotFoundError",
    "ChallengeValidator",
    "DoorService",
    "EnemyService",
    "InventoryService",
    "ItemService",
    "NpcService",
    "PlayerService",
    "ProgressService",
    "get_challenge_catalog",
    "seed_world",
]
