"""Report endpoints. Visibility depends on the requester's access tier."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query

from elitescope import schemas
from elitescope.api import deps
from elitescope.api.context import ApiContext
from elitescope.api.deps import Inject
from elitescope.domains.reports.protocols import ReportServiceProtocol

router = APIRouter()


@router.get("", response_model=List[schemas.Report], summary="List Reports")
async def list(
    type: Optional[str] = Query(None),
    limit: Optional[int] = Query(None, ge=1, description="Defaults to 20"),
    offset: int = Query(0, ge=0),
    ctx: ApiContext = Depends(deps.get_context),
    reports: ReportServiceProtocol = Inject(ReportServiceProtocol),
) -> List[schemas.Report]:
    """Reports the requester may read, newest first."""
    return await reports.list(ctx.requester, type=type, limit=limit, offset=offset)


@router.get(
    "/{report_id}",
    response_model=schemas.Report,
    summary="Get Report",
    responses={401: {"description": "Sign-in required"}, 403: {"description": "Tier too low"}},
)
async def get(
    report_id: int = Path(..., ge=1),
    ctx: ApiContext = Depends(deps.get_context),
    reports: ReportServiceProtocol = Inject(ReportServiceProtocol),
) -> schemas.Report:
    """Get one report if the requester's tier allows it."""
    return await reports.get(ctx.requester, report_id)
