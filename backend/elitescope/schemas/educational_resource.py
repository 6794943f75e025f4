"""Educational resource schema module."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from elitescope.core.shared_models import AccessLevel


class EducationalResource(BaseModel):
    """Schema for an EducationalResource."""

    id: int
    title: str
    description: Optional[str] = None
    resource_type: Optional[str] = None
    content: Optional[str] = None
    access_level: AccessLevel = AccessLevel.PUBLIC
    file_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
