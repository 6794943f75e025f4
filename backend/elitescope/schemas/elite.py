"""Elite schema module."""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Elite(BaseModel):
    """Schema for an Elite profile."""

    id: int
    name: str
    date_of_birth: Optional[str] = None
    education: Optional[str] = None
    career_path: Optional[str] = None
    current_positions: List[str] = Field(default_factory=list)
    past_positions: List[str] = Field(default_factory=list)
    political_orientation: Optional[str] = None
    sphere_of_influence: Optional[str] = None
    net_worth: Optional[Decimal] = None
    biography: Optional[str] = None
    public_statements: Optional[str] = None
    foreign_policy_positions: Optional[str] = None
    image_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("current_positions", "past_positions", mode="before")
    @classmethod
    def default_positions(cls, v):
        """Treat NULL position lists as empty."""
        return v or []


class EliteConnection(BaseModel):
    """Schema for an undirected connection between two elites."""

    id: int
    elite_id_1: int
    elite_id_2: int
    connection_type: str
    description: Optional[str] = None
    strength: Optional[int] = 1

    model_config = ConfigDict(from_attributes=True)


class EliteOrganization(BaseModel):
    """Schema for an elite's affiliation with an organization."""

    id: int
    elite_id: int
    organization_id: int
    role: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    is_current: str = "yes"

    model_config = ConfigDict(from_attributes=True)


class NetworkNode(BaseModel):
    """Node of an elite ego graph."""

    id: int
    label: str
    is_center: bool = False


class NetworkEdge(BaseModel):
    """Edge of an elite ego graph."""

    id: int
    source: int
    target: int
    connection_type: str
    strength: int
    weight: float


class EliteNetwork(BaseModel):
    """One-hop ego graph around an elite."""

    center_id: int
    nodes: List[NetworkNode]
    edges: List[NetworkEdge]
