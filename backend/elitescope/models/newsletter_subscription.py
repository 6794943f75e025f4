"""Newsletter subscription model."""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from elitescope.core.shared_models import YesNo
from elitescope.models._base import Base


class NewsletterSubscription(Base):
    """One row per subscribed email address."""

    __tablename__ = "newsletter_subscriptions"

    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    subscribed_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    is_active: Mapped[str] = mapped_column(
        String(3), nullable=False, default=YesNo.YES.value, server_default=YesNo.YES.value
    )
