"""Protocols for dependency injection."""

from elitescope.core.protocols.event_bus import DomainEvent, EventBus, EventHandler
from elitescope.core.protocols.metrics import AccessMetrics, HttpMetrics, MetricsRenderer

__all__ = [
    "AccessMetrics",
    "DomainEvent",
    "EventBus",
    "EventHandler",
    "HttpMetrics",
    "MetricsRenderer",
]
