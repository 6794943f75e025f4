"""Newsletter schema module."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class NewsletterSubscribe(BaseModel):
    """Request body for subscribing to the newsletter."""

    email: EmailStr
    name: Optional[str] = Field(default=None, max_length=255)


class NewsletterSubscription(BaseModel):
    """Schema for a stored NewsletterSubscription."""

    id: int
    email: str
    name: Optional[str] = None
    subscribed_at: Optional[datetime] = None
    is_active: str = "yes"

    model_config = ConfigDict(from_attributes=True)
