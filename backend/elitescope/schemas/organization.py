"""Organization schema module."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Organization(BaseModel):
    """Schema for an Organization."""

    id: int
    name: str
    type: str
    description: Optional[str] = None
    founded: Optional[str] = None
    headquarters: Optional[str] = None
    market_cap: Optional[Decimal] = None
    revenue: Optional[Decimal] = None
    employees: Optional[int] = None
    lobbying_spending: Optional[Decimal] = None
    political_donations: Optional[Decimal] = None
    foreign_policy_positions: Optional[str] = None
    logo_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
