"""FastAPI application for the draftroom snake-draft server."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from draftroom import __version__
from draftroom.api.routers import (
    draft_router,
    players_router,
    queue_router,
    teams_router,
)
from draftroom.api.services.draft_service import get_draft_service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    service = get_draft_service()
    logger.info("Draftroom API starting up (%d players)", len(service.catalog))
    await service.start()
    yield
    # Shutdown
    logger.info("Draftroom API shutting down...")
    await service.stop()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Draftroom API",
        description="Fantasy baseball snake draft server",
        version=__version__,
        lifespan=lifespan,
    )

    # Configure CORS for frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(players_router, prefix="/api")
    app.include_router(draft_router, prefix="/api")
    app.include_router(teams_router, prefix="/api")
    app.include_router(queue_router, prefix="/api")

    @app.get("/api/health")
    async def health() -> dict:
        """Health check endpoint."""
        service = get_draft_service()
        return {
            "ok": True,
            "version": __version__,
            "players": len(service.catalog),
            "draft_active": service.engine.state.is_active,
        }

    return app


# Create app instance
app = create_app()


def run_api(host: str = "0.0.0.0", port: int = 3001, reload: bool = False) -> None:
    """Run the API server."""
    uvicorn.run(
        "draftroom.api.main:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    run_api(reload=True)
