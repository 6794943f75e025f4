"""Authentication endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends

from elitescope import schemas
from elitescope.api import deps
from elitescope.api.context import ApiContext

router = APIRouter()


@router.get("/me", response_model=Optional[schemas.User], summary="Current User")
async def me(ctx: ApiContext = Depends(deps.get_context)) -> Optional[schemas.User]:
    """The signed-in user, or null for anonymous requests."""
    return ctx.user
