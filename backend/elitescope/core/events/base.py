"""Base class for all domain events."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class DomainEvent(BaseModel):
    """Frozen, validated event carrying the fields the EventBus routes on.

    Subclasses narrow ``event_type`` to a domain-specific enum.
    """

    model_config = ConfigDict(frozen=True)

    event_type: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
