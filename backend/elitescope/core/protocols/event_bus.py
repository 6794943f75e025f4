"""EventBus protocol for domain event fan-out.

Domain services publish events; subscribers registered at startup react to
them (audit logging today).

Usage:
    await event_bus.publish(ExpertAccessReviewedEvent(...))
    event_bus.subscribe("expert_access.*", audit_handler)
"""

from datetime import datetime
from typing import Awaitable, Callable, Protocol, runtime_checkable


@runtime_checkable
class DomainEvent(Protocol):
    """What the bus needs from an event for routing."""

    @property
    def event_type(self) -> str:
        """Dot-separated identifier, ``{domain}.{action}``."""
        ...

    @property
    def timestamp(self) -> datetime:
        """When the event occurred (UTC)."""
        ...


EventHandler = Callable[[DomainEvent], Awaitable[None]]


@runtime_checkable
class EventBus(Protocol):
    """Publishes events to every subscriber whose glob pattern matches."""

    async def publish(self, event: DomainEvent) -> None:
        """Publish an event to all matching subscribers."""
        ...

    def subscribe(self, event_pattern: str, handler: EventHandler) -> None:
        """Register a handler for events matching ``event_pattern`` (e.g. 'expert_access.*')."""
        ...
