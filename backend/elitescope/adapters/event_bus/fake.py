"""Fake event bus for testing."""

import fnmatch
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from elitescope.core.protocols.event_bus import DomainEvent, EventHandler


class FakeEventBus:
    """Records published events for assertions.

    Usage:
        fake = FakeEventBus()
        await service.review(..., event_bus=fake)
        event = fake.assert_published("expert_access.reviewed")
    """

    def __init__(self, call_subscribers: bool = False) -> None:
        """Initialize the fake; subscribers only run when ``call_subscribers`` is set."""
        self.events: list["DomainEvent"] = []
        self._subscribers: list[tuple[str, "EventHandler"]] = []
        self._call_subscribers = call_subscribers

    def subscribe(self, event_pattern: str, handler: "EventHandler") -> None:
        """Register a handler."""
        self._subscribers.append((event_pattern, handler))

    async def publish(self, event: "DomainEvent") -> None:
        """Record the event (and optionally call subscribers)."""
        self.events.append(event)
        if self._call_subscribers:
            for pattern, handler in self._subscribers:
                if fnmatch.fnmatch(event.event_type, pattern):
                    await handler(event)

    def has_event(self, event_type: str) -> bool:
        """Check if an event of the given type was published."""
        return any(e.event_type == event_type for e in self.events)

    def get_events(self, event_type: str) -> list["DomainEvent"]:
        """Get all events of the given type."""
        return [e for e in self.events if e.event_type == event_type]

    def assert_published(self, event_type: str) -> "DomainEvent":
        """Assert that an event was published and return the first one."""
        matching = self.get_events(event_type)
        if not matching:
            published = [e.event_type for e in self.events]
            raise AssertionError(
                f"Expected event '{event_type}' was not published. Published events: {published}"
            )
        return matching[0]

    def assert_not_published(self, event_type: str) -> None:
        """Assert that an event was NOT published."""
        if self.has_event(event_type):
            raise AssertionError(f"Event '{event_type}' was published but should not have been")
