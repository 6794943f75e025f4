"""Small response schemas shared across endpoints."""

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """Acknowledgement of a write."""

    success: bool = True


class Stats(BaseModel):
    """Catalog counters."""

    elites: int = 0
    organizations: int = 0
    decisions: int = 0
    reports: int = 0
