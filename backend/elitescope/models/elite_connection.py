"""Elite connection model."""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from elitescope.models._base import Base


class EliteConnection(Base):
    """Undirected edge between two elites.

    Several edges of different types may exist between the same pair. The
    column order of the pair carries no meaning.
    """

    __tablename__ = "elite_connections"

    elite_id_1: Mapped[int] = mapped_column(
        Integer, ForeignKey("elites.id", ondelete="CASCADE"), nullable=False, index=True
    )
    elite_id_2: Mapped[int] = mapped_column(
        Integer, ForeignKey("elites.id", ondelete="CASCADE"), nullable=False, index=True
    )
    connection_type: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    strength: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, default=1)  # 1-10
