"""In-memory event bus implementation."""

import asyncio
import fnmatch
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from elitescope.core.protocols.event_bus import DomainEvent, EventHandler

# Standard logging avoids a circular import with elitescope.core.logging
logger = logging.getLogger(__name__)


class InMemoryEventBus:
    """Fans events out to in-process subscribers.

    Subscribers run concurrently; a failing subscriber is logged and does not
    affect the others or the publisher.
    """

    def __init__(self) -> None:
        """Initialize the event bus."""
        self._subscribers: list[tuple[str, "EventHandler"]] = []

    def subscribe(self, event_pattern: str, handler: "EventHandler") -> None:
        """Register a handler for events matching the glob pattern."""
        self._subscribers.append((event_pattern, handler))
        logger.debug(f"EventBus: subscribed handler to '{event_pattern}'")

    async def publish(self, event: "DomainEvent") -> None:
        """Deliver ``event`` to every matching subscriber."""
        handlers = [h for p, h in self._subscribers if fnmatch.fnmatch(event.event_type, p)]
        if not handlers:
            logger.debug(f"EventBus: no subscribers for '{event.event_type}'")
            return

        results = await asyncio.gather(*(h(event) for h in handlers), return_exceptions=True)
        for result in results:
            if isinstance(result, Exception):
                logger.error(
                    f"EventBus: subscriber failed for '{event.event_type}': {result}",
                    exc_info=result,
                )
