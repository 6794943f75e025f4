"""Educational resource endpoints. Visibility depends on the requester's access tier."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query

from elitescope import schemas
from elitescope.api import deps
from elitescope.api.context import ApiContext
from elitescope.api.deps import Inject
from elitescope.domains.education.protocols import EducationServiceProtocol

router = APIRouter()


@router.get("", response_model=List[schemas.EducationalResource], summary="List Resources")
async def list(
    resource_type: Optional[str] = Query(None, alias="resourceType"),
    limit: Optional[int] = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    ctx: ApiContext = Depends(deps.get_context),
    education: EducationServiceProtocol = Inject(EducationServiceProtocol),
) -> List[schemas.EducationalResource]:
    """Resources the requester may read, newest first."""
    return await education.list(
        ctx.requester, resource_type=resource_type, limit=limit, offset=offset
    )


@router.get("/{resource_id}", response_model=schemas.EducationalResource, summary="Get Resource")
async def get(
    resource_id: int = Path(..., ge=1),
    ctx: ApiContext = Depends(deps.get_context),
    education: EducationServiceProtocol = Inject(EducationServiceProtocol),
) -> schemas.EducationalResource:
    """Get one resource if the requester's tier allows it."""
    return await education.get(ctx.requester, resource_id)
