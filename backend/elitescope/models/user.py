"""User model."""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from elitescope.core.shared_models import UserRole
from elitescope.models._base import Base, UpdatedAtMixin


class User(Base, UpdatedAtMixin):
    """Account linked to an external identity."""

    __tablename__ = "users"

    open_id: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(320), nullable=True)
    login_method: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    role: Mapped[str] = mapped_column(
        String(16), nullable=False, default=UserRole.USER.value, server_default=UserRole.USER.value
    )
    affiliation: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    research_interests: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    last_signed_in: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
