"""Event subscribers for the expert access domain."""

from typing import List

from elitescope.core.logging import logger
from elitescope.core.protocols.event_bus import DomainEvent


class ExpertAccessAuditSubscriber:
    """Writes one audit log line per expert access lifecycle event."""

    EVENT_PATTERNS: List[str] = ["expert_access.*"]

    def __init__(self) -> None:
        """Bind the audit logger."""
        self._logger = logger.with_prefix("[audit] ")

    async def handle(self, event: DomainEvent) -> None:
        """Log the event type, its timestamp and payload fields as dimensions."""
        payload = event.model_dump(mode="json")
        event_type = payload.pop("event_type")
        timestamp = payload.pop("timestamp")
        self._logger.with_context(event_type=event_type, **payload).info(
            f"{event_type} at {timestamp}"
        )
