"""Report model."""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from elitescope.core.shared_models import AccessLevel
from elitescope.models._base import Base, UpdatedAtMixin


class Report(Base, UpdatedAtMixin):
    """Analytical report gated by ``access_level``."""

    __tablename__ = "reports"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    type: Mapped[str] = mapped_column(String(100), nullable=False)
    summary: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    access_level: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=AccessLevel.PUBLIC.value,
        server_default=AccessLevel.PUBLIC.value,
        index=True,
    )
    publish_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    author: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    pdf_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
