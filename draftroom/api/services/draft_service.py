"""
Service layer for the draft API.

Holds the process-wide draft engine and the background ticker that
drives its pick clock.
"""

import asyncio
import logging
from typing import Optional

from draftroom.config import DraftConfig, get_config
from draftroom.core.catalog import PlayerCatalog
from draftroom.draft.engine import DraftEngine
from draftroom.events.bus import EventBus
from draftroom.events.log_writer import DraftLogWriter

logger = logging.getLogger(__name__)


class DraftTicker:
    """
    Periodically calls engine.tick() from the event loop.

    The engine owns no timer of its own; this is the external scheduler
    that makes expired turns resolve without a client polling.
    """

    def __init__(self, engine: DraftEngine, interval: float = 1.0) -> None:
        self.engine = engine
        self.interval = interval
        self._is_running = False
        self._tick_task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._is_running

    async def start(self) -> None:
        """Start the tick loop."""
        if self._is_running or self.interval <= 0:
            return
        self._is_running = True
        self._tick_task = asyncio.create_task(self._tick_loop())

    async def stop(self) -> None:
        """Stop the tick loop."""
        self._is_running = False
        if self._tick_task:
            self._tick_task.cancel()
            try:
                await self._tick_task
            except asyncio.CancelledError:
                pass
            self._tick_task = None

    async def _tick_loop(self) -> None:
        while self._is_running:
            try:
                self.engine.tick()
                await asyncio.sleep(self.interval)
            except asyncio.CancelledError:
                break
            except Exception:
                logger.exception("Error in draft tick loop")
                await asyncio.sleep(1.0)  # Back off on error


class DraftService:
    """Owns the engine, its event bus and the ticker for one process."""

    def __init__(self, config: Optional[DraftConfig] = None, catalog: Optional[PlayerCatalog] = None) -> None:
        self.config = config or get_config()
        self.catalog = catalog if catalog is not None else PlayerCatalog.from_json_file(self.config.players_path)
        self.event_bus = EventBus()
        self.log_writer = DraftLogWriter().attach(self.event_bus)
        self.engine = DraftEngine(self.catalog, config=self.config, event_bus=self.event_bus)
        self.ticker = DraftTicker(self.engine, self.config.tick_interval_seconds)

    async def start(self) -> None:
        await self.ticker.start()

    async def stop(self) -> None:
        await self.ticker.stop()


# Global draft service, created on first use
_service: Optional[DraftService] = None


def get_draft_service() -> DraftService:
    global _service
    if _service is None:
        _service = DraftService()
    return _service


def get_engine() -> DraftEngine:
    """The process-wide engine."""
    return get_draft_service().engine


def reset_draft_service(service: Optional[DraftService] = None) -> None:
    """Swap the global service (None drops it so the next use rebuilds)."""
    global _service
    _service = service
