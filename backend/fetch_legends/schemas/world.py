"""Schema of the starting-world document loaded at start-up."""

from __future__ import annotations

from pydantic import Field, model_validator

from fetch_legends.models.npc import NpcMood
from fetch_legends.schemas.base import CamelModel, Slug
from fetch_legends.schemas.door import DoorReplaceRequest
from fetch_legends.schemas.inventory import InventoryAddRequest
from fetch_legends.schemas.item import ItemCreateRequest
from fetch_legends.schemas.player import PlayerReplaceRequest


class DoorSeed(DoorReplaceRequest):
    id: Slug


class NpcSeed(CamelModel):
    id: Slug
    name: str = Field(min_length=1, max_length=100)
    dialogue: str = ""
    mood: NpcMood = NpcMood.NEUTRAL


class EnemySeed(CamelModel):
    id: Slug
    name: str = Field(min_length=1, max_length=100)
    health: int = Field(ge=0)
    damage: int = Field(default=1, ge=0)


class WorldSeed(CamelModel):
    player: PlayerReplaceRequest
    items: list[ItemCreateRequest] = Field(default_factory=list)
    doors: list[DoorSeed] = Field(default_factory=list)
    npcs: list[NpcSeed] = Field(default_factory=list)
    enemies: list[EnemySeed] = Field(default_factory=list)
    inventory: list[InventoryAddRequest] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_references(self) -> "WorldSeed":
        item_ids = {item.id for item in self.items}
        missing = sorted({entry.item_id for entry in self.inventory} - item_ids)
        if missing:
            raise ValueError(f"inventory references unknown items: {', '.join(missing)}")
        for door in self.doors:
            if door.locked and door.open:
                raise ValueError(f"door {door.id} cannot be both locked and open")
        return self


__all__ = ["DoorSeed", "EnemySeed", "NpcSeed", "WorldSeed"]
