"""Political decision schema module."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PoliticalDecision(BaseModel):
    """Schema for a PoliticalDecision."""

    id: int
    title: str
    type: str
    category: Optional[str] = None
    description: Optional[str] = None
    date_enacted: Optional[datetime] = None
    administration: Optional[str] = None
    key_players: List[int] = Field(default_factory=list)
    lobbying_influence: Optional[str] = None
    impact: Optional[str] = None
    document_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("key_players", mode="before")
    @classmethod
    def default_key_players(cls, v):
        """Treat a NULL key player list as empty."""
        return v or []
