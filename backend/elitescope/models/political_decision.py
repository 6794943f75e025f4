"""Political decision model."""

from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from elitescope.models._base import Base, UpdatedAtMixin


class PoliticalDecision(Base, UpdatedAtMixin):
    """Legislative act, executive order or budget resolution."""

    __tablename__ = "political_decisions"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    type: Mapped[str] = mapped_column(String(100), nullable=False)
    category: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    date_enacted: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    administration: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    # Ordered list of elite ids
    key_players: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)
    lobbying_influence: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    impact: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    document_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
