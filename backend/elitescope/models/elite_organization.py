"""Elite organization affiliation model."""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from elitescope.core.shared_models import YesNo
from elitescope.models._base import Base


class EliteOrganization(Base):
    """Role held by an elite in an organization."""

    __tablename__ = "elite_organizations"

    elite_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("elites.id", ondelete="CASCADE"), nullable=False, index=True
    )
    organization_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    role: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    start_date: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    end_date: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    is_current: Mapped[str] = mapped_column(
        String(3), nullable=False, default=YesNo.YES.value, server_default=YesNo.YES.value
    )
