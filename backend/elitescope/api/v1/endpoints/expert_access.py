"""Expert access request endpoints.

Anyone may submit a request; listing and reviewing require the admin role.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query

from elitescope import schemas
from elitescope.api import deps
from elitescope.api.context import ApiContext
from elitescope.api.deps import Inject
from elitescope.core.shared_models import ExpertAccessStatus
from elitescope.domains.expert_access.protocols import ExpertAccessServiceProtocol

router = APIRouter()


@router.post(
    "/requests",
    response_model=schemas.SuccessResponse,
    summary="Request Expert Access",
    responses={503: {"description": "Storage backend is unavailable"}},
)
async def submit(
    body: schemas.ExpertAccessRequestCreate,
    ctx: ApiContext = Depends(deps.get_context),
    expert_access: ExpertAccessServiceProtocol = Inject(ExpertAccessServiceProtocol),
) -> schemas.SuccessResponse:
    """Submit a pending request for expert-tier access."""
    return await expert_access.submit(ctx.requester, body)


@router.get(
    "/requests",
    response_model=List[schemas.ExpertAccessRequest],
    summary="List Expert Access Requests",
)
async def list(
    status: Optional[ExpertAccessStatus] = Query(None),
    ctx: ApiContext = Depends(deps.get_context),
    expert_access: ExpertAccessServiceProtocol = Inject(ExpertAccessServiceProtocol),
) -> List[schemas.ExpertAccessRequest]:
    """List requests, newest first (admin only)."""
    return await expert_access.list(ctx.requester, status=status)


@router.patch(
    "/requests/{request_id}",
    response_model=schemas.SuccessResponse,
    summary="Review Expert Access Request",
    responses={409: {"description": "Request was already reviewed"}},
)
async def review(
    body: schemas.ExpertAccessRequestReview,
    request_id: int = Path(..., ge=1),
    ctx: ApiContext = Depends(deps.get_context),
    expert_access: ExpertAccessServiceProtocol = Inject(ExpertAccessServiceProtocol),
) -> schemas.SuccessResponse:
    """Approve or reject a pending request (admin only)."""
    result = await expert_access.review(
        ctx.requester, request_id, ExpertAccessStatus(body.status)
    )
    ctx.logger.info(f"Reviewed expert access request {request_id}: {result.status.value}")
    return schemas.SuccessResponse()
