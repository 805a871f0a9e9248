"""Event bus for pub/sub communication."""

import logging
from collections import defaultdict
from typing import Callable, TypeVar

from draftroom.events.types import DraftEvent

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=DraftEvent)
EventHandler = Callable[[DraftEvent], None]


class EventBus:
    """
    Simple pub/sub event bus for decoupling the draft engine from listeners.

    The engine publishes turn outcomes after they are committed; listeners
    (log writers, websocket pushers) subscribe to the event types they care
    about. A failing listener is logged and never undoes a commit.

    Example:
        bus = EventBus()

        def on_pick(event: PickEvent):
            print(f"{event.user_id} took {event.player.name}")

        bus.subscribe(PickEvent, on_pick)
    """

    def __init__(self) -> None:
        """Initialize the event bus."""
        self._handlers: dict[type[DraftEvent], list[EventHandler]] = defaultdict(list)
        self._global_handlers: list[EventHandler] = []

    def subscribe(
        self,
        event_type: type[T],
        handler: Callable[[T], None],
    ) -> None:
        """
        Register a handler for a specific event type.

        Args:
            event_type: The type of event to handle
            handler: Callback function that receives the event
        """
        self._handlers[event_type].append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        """Register a handler for all events."""
        self._global_handlers.append(handler)

    def unsubscribe(
        self,
        event_type: type[T],
        handler: Callable[[T], None],
    ) -> None:
        """Remove a handler for a specific event type."""
        if handler in self._handlers[event_type]:
            self._handlers[event_type].remove(handler)

    def unsubscribe_all(self, handler: EventHandler) -> None:
        """Remove a global handler."""
        if handler in self._global_handlers:
            self._global_handlers.remove(handler)

    def emit(self, event: DraftEvent) -> None:
        """
        Emit an event to all registered handlers.

        Handlers for the specific event type are called first,
        then global handlers that receive all events.

        Args:
            event: The event to emit
        """
        for handler in list(self._handlers[type(event)]) + list(self._global_handlers):
            try:
                handler(event)
            except Exception:
                logger.exception("Event handler %r failed for %s", handler, type(event).__name__)

    def clear(self) -> None:
        """Remove all handlers."""
        self._handlers.clear()
        self._global_handlers.clear()

    def handler_count(self, event_type: type[DraftEvent] | None = None) -> int:
        """
        Get the number of registered handlers.

        Args:
            event_type: If provided, count handlers for this type only.
                       If None, count all handlers including global.
        """
        if event_type is None:
            total = sum(len(handlers) for handlers in self._handlers.values())
            return total + len(self._global_handlers)
        return len(self._handlers[event_type])
