"""Expert access request lifecycle events."""

from enum import Enum
from typing import Optional

from elitescope.core.events.base import DomainEvent
from elitescope.core.shared_models import ExpertAccessStatus


class ExpertAccessEventType(str, Enum):
    """Expert access event types."""

    SUBMITTED = "expert_access.submitted"
    REVIEWED = "expert_access.reviewed"


class ExpertAccessSubmittedEvent(DomainEvent):
    """A new request was stored as pending."""

    event_type: ExpertAccessEventType = ExpertAccessEventType.SUBMITTED
    email: str
    user_id: Optional[int] = None


class ExpertAccessReviewedEvent(DomainEvent):
    """An admin approved or rejected a pending request."""

    event_type: ExpertAccessEventType = ExpertAccessEventType.REVIEWED
    request_id: int
    status: ExpertAccessStatus
    reviewed_by: Optional[int] = None
    requester_user_id: Optional[int] = None
