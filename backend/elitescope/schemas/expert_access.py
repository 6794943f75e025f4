"""Expert access request schema module."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from elitescope.core.shared_models import ExpertAccessStatus


class ExpertAccessRequestCreate(BaseModel):
    """Request body for submitting an expert access request."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    affiliation: Optional[str] = None
    research_interests: Optional[str] = None
    justification: Optional[str] = None


class ExpertAccessRequestReview(BaseModel):
    """Request body for an admin review decision."""

    status: Literal["approved", "rejected"]


class ExpertAccessRequest(BaseModel):
    """Schema for a stored ExpertAccessRequest."""

    id: int
    user_id: Optional[int] = None
    name: str
    email: str
    affiliation: Optional[str] = None
    research_interests: Optional[str] = None
    justification: Optional[str] = None
    status: ExpertAccessStatus = ExpertAccessStatus.PENDING
    created_at: Optional[datetime] = None
    reviewed_at: Optional[datetime] = None
    reviewed_by: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)
