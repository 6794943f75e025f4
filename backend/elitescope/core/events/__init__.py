"""Domain events."""

from elitescope.core.events.base import DomainEvent
from elitescope.core.events.expert_access import (
    ExpertAccessEventType,
    ExpertAccessReviewedEvent,
    ExpertAccessSubmittedEvent,
)

__all__ = [
    "DomainEvent",
    "ExpertAccessEventType",
    "ExpertAccessReviewedEvent",
    "ExpertAccessSubmittedEvent",
]
