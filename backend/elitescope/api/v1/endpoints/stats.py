"""Catalog statistics endpoint."""

from fastapi import APIRouter

from elitescope import schemas
from elitescope.api.deps import Inject
from elitescope.domains.stats.protocols import StatsServiceProtocol

router = APIRouter()


@router.get("", response_model=schemas.Stats, summary="Get Stats")
async def get(stats: StatsServiceProtocol = Inject(StatsServiceProtocol)) -> schemas.Stats:
    """Counts of elites, organizations, decisions and reports."""
    return await stats.get()
