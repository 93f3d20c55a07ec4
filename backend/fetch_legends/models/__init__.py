"""World models persisted through SQLAlchemy."""

from fetch_legends.models.base import Base
from fetch_legends.models.door import Door
from fetch_legends.models.enemy import Enemy
from fetch_legends.models.inventory import InventoryEntry
from fetch_legends.models.item import Item, ItemKind
from fetch_legends.models.npc import Npc, NpcMood
from fetch_legends.models.player import PLAYER_ID, Player
from fetch_legends.models.progress import ChallengeCompletion

__all__ = [
    "Base",
    "ChallengeCompletion",
    "Door",
    "Enemy",
    "InventoryEntry",
    "Item",
    "ItemKind",
    "Npc",
    "NpcMood",
    "PLAYER_ID",
    "Player",
]
