"""Router aggregations for public API endpoints."""

from fastapi import APIRouter

from fetch_legends.api.routes import (
    challenges,
    doors,
    enemies,
    health,
    inventory,
    items,
    npcs,
    player,
    progress,
)
from fetch_legends.core.config import settings

# Health router (no prefix)
root_router = APIRouter()
root_router.include_router(health.router, tags=["health"])

# Game routers under the configured prefix
api_router = APIRouter(prefix=settings.api_prefix)
api_router.include_router(challenges.router)
api_router.include_router(progress.router)
api_router.include_router(items.router)
api_router.include_router(doors.router)
api_router.include_router(inventory.router)
api_router.include_router(npcs.router)
api_router.include_router(enemies.router)
api_router.include_router(player.router)

__all__ = ["api_router", "root_router"]
