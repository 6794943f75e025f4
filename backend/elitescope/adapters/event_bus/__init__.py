"""Event bus adapters."""

from elitescope.adapters.event_bus.in_memory import InMemoryEventBus

__all__ = ["InMemoryEventBus"]
