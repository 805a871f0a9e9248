"""API routers for different resource types."""

from draftroom.api.routers.draft import router as draft_router
from draftroom.api.routers.players import router as players_router
from draftroom.api.routers.queue import router as queue_router
from draftroom.api.routers.teams import router as teams_router

__all__ = [
    "draft_router",
    "players_router",
    "queue_router",
    "teams_router",
]
