"""Data access layer for the game world."""

from fetch_legends.repositories.door import DoorRepository
from fetch_legends.repositories.enemy import EnemyRepository
from fetch_legends.repositories.inventory import InventoryRepository
from fetch_legends.repositories.item import ItemRepository
from fetch_legends.repositories.npc import NpcRepository
from fetch_legends.repositories.player import PlayerRepository
from fetch_legends.repositories.progress import ProgressRepository

__all__ = [
    "DoorRepository",
    "EnemyRepository",
    "InventoryRepository",
    "ItemRepository",
    "NpcRepository",
    "PlayerRepository",
    "ProgressRepository",
]
