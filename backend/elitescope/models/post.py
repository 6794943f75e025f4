"""Post model."""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from elitescope.models._base import Base, UpdatedAtMixin


class Post(Base, UpdatedAtMixin):
    """News item, analysis or commentary."""

    __tablename__ = "posts"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    slug: Mapped[str] = mapped_column(String(500), nullable=False, unique=True)
    excerpt: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    category: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    author: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    publish_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    image_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
