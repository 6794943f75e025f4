"""Educational resource model."""

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from elitescope.core.shared_models import AccessLevel
from elitescope.models._base import Base, UpdatedAtMixin


class EducationalResource(Base, UpdatedAtMixin):
    """Course, methodological material or guideline gated by ``access_level``."""

    __tablename__ = "educational_resources"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    resource_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    access_level: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=AccessLevel.PUBLIC.value,
        server_default=AccessLevel.PUBLIC.value,
        index=True,
    )
    file_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
