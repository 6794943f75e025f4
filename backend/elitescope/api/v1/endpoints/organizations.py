"""Organization catalog endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Path, Query

from elitescope import schemas
from elitescope.api.deps import Inject
from elitescope.domains.organizations.protocols import OrganizationServiceProtocol

router = APIRouter()


@router.get("", response_model=List[schemas.Organization], summary="Search Organizations")
async def search(
    query: Optional[str] = Query(None, description="Substring of the name or description"),
    type: Optional[str] = Query(None),
    limit: Optional[int] = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    organizations: OrganizationServiceProtocol = Inject(OrganizationServiceProtocol),
) -> List[schemas.Organization]:
    """Search organizations, ordered by name."""
    return await organizations.search(query=query, type=type, limit=limit, offset=offset)


@router.get("/{organization_id}", response_model=schemas.Organization, summary="Get Organization")
async def get(
    organization_id: int = Path(..., ge=1),
    organizations: OrganizationServiceProtocol = Inject(OrganizationServiceProtocol),
) -> schemas.Organization:
    """Get one organization."""
    return await organizations.get(organization_id)
