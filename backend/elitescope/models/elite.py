"""Elite model."""

from decimal import Decimal
from typing import Optional

from sqlalchemy import JSON, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from elitescope.models._base import Base, UpdatedAtMixin


class Elite(Base, UpdatedAtMixin):
    """Profile of a public figure."""

    __tablename__ = "elites"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    date_of_birth: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    education: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    career_path: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    current_positions: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)
    past_positions: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)
    political_orientation: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    # Big Tech, Defense, Finance, ...
    sphere_of_influence: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    net_worth: Mapped[Optional[Decimal]] = mapped_column(Numeric(15, 2), nullable=True)
    biography: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    public_statements: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    foreign_policy_positions: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
