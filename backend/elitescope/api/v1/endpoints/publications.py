"""Publication endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Query

from elitescope import schemas
from elitescope.api.deps import Inject
from elitescope.domains.content.protocols import PublicationServiceProtocol

router = APIRouter()


@router.get("", response_model=List[schemas.Publication], summary="List Publications")
async def list(
    publication_type: Optional[str] = Query(None, alias="publicationType"),
    limit: Optional[int] = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    publications: PublicationServiceProtocol = Inject(PublicationServiceProtocol),
) -> List[schemas.Publication]:
    """Publications, newest first."""
    return await publications.list(publication_type=publication_type, limit=limit, offset=offset)
