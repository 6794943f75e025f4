"""Report schema module."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from elitescope.core.shared_models import AccessLevel


class Report(BaseModel):
    """Schema for an analytical Report."""

    id: int
    title: str
    type: str
    summary: Optional[str] = None
    content: Optional[str] = None
    access_level: AccessLevel = AccessLevel.PUBLIC
    publish_date: datetime
    author: Optional[str] = None
    pdf_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
