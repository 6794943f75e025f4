"""Organization model."""

from decimal import Decimal
from typing import Optional

from sqlalchemy import Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from elitescope.models._base import Base, UpdatedAtMixin


class Organization(Base, UpdatedAtMixin):
    """Corporation, think tank, political structure or lobbying group."""

    __tablename__ = "organizations"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    founded: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    headquarters: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    market_cap: Mapped[Optional[Decimal]] = mapped_column(Numeric(15, 2), nullable=True)
    revenue: Mapped[Optional[Decimal]] = mapped_column(Numeric(15, 2), nullable=True)
    employees: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    lobbying_spending: Mapped[Optional[Decimal]] = mapped_column(Numeric(15, 2), nullable=True)
    political_donations: Mapped[Optional[Decimal]] = mapped_column(Numeric(15, 2), nullable=True)
    foreign_policy_positions: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    logo_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
