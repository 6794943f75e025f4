"""User schema module."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from elitescope.core.shared_models import UserRole


class UserBase(BaseModel):
    """Base schema for User."""

    open_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None
    affiliation: Optional[str] = None
    research_interests: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class UserUpsert(UserBase):
    """Schema for creating or refreshing a User on sign-in.

    ``role`` is only written when set explicitly; otherwise the stored role is
    kept (or the owner rule applies on first insert).
    """

    role: Optional[UserRole] = None
    last_signed_in: Optional[datetime] = None


class User(UserBase):
    """Schema for User stored in DB."""

    id: int
    role: UserRole = UserRole.USER
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    last_signed_in: Optional[datetime] = None
