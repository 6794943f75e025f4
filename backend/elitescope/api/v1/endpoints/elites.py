"""Elite catalog endpoints: search, profiles, connections and networks."""

from typing import List, Optional

from fastapi import APIRouter, Path, Query

from elitescope import schemas
from elitescope.api.deps import Inject
from elitescope.domains.elites.protocols import EliteServiceProtocol

router = APIRouter()


@router.get("", response_model=List[schemas.Elite], summary="Search Elites")
async def search(
    query: Optional[str] = Query(None, description="Substring of the name or biography"),
    sphere_of_influence: Optional[str] = Query(None, alias="sphereOfInfluence"),
    political_orientation: Optional[str] = Query(None, alias="politicalOrientation"),
    limit: Optional[int] = Query(None, ge=1, description="Defaults to 50"),
    offset: int = Query(0, ge=0),
    elites: EliteServiceProtocol = Inject(EliteServiceProtocol),
) -> List[schemas.Elite]:
    """Search elites by free text and categorical filters, ordered by name."""
    return await elites.search(
        query=query,
        sphere_of_influence=sphere_of_influence,
        political_orientation=political_orientation,
        limit=limit,
        offset=offset,
    )


@router.get("/all", response_model=List[schemas.Elite], summary="List All Elites")
async def list_all(
    elites: EliteServiceProtocol = Inject(EliteServiceProtocol),
) -> List[schemas.Elite]:
    """Every elite, ordered by name."""
    return await elites.list_all()


@router.get("/{elite_id}", response_model=schemas.Elite, summary="Get Elite")
async def get(
    elite_id: int = Path(..., ge=1),
    elites: EliteServiceProtocol = Inject(EliteServiceProtocol),
) -> schemas.Elite:
    """Get one elite profile."""
    return await elites.get(elite_id)


@router.get(
    "/{elite_id}/connections",
    response_model=List[schemas.EliteConnection],
    summary="Get Elite Connections",
)
async def get_connections(
    elite_id: int = Path(..., ge=1),
    elites: EliteServiceProtocol = Inject(EliteServiceProtocol),
) -> List[schemas.EliteConnection]:
    """Connections in which the elite is either endpoint, each listed once."""
    return await elites.get_connections(elite_id)


@router.get(
    "/{elite_id}/organizations",
    response_model=List[schemas.EliteOrganization],
    summary="Get Elite Affiliations",
)
async def get_organizations(
    elite_id: int = Path(..., ge=1),
    is_current: Optional[bool] = Query(None, alias="isCurrent"),
    elites: EliteServiceProtocol = Inject(EliteServiceProtocol),
) -> List[schemas.EliteOrganization]:
    """Organization affiliations of the elite, optionally only current or past ones."""
    return await elites.get_organizations(elite_id, is_current=is_current)


@router.get("/{elite_id}/network", response_model=schemas.EliteNetwork, summary="Get Elite Network")
async def get_network(
    elite_id: int = Path(..., ge=1),
    elites: EliteServiceProtocol = Inject(EliteServiceProtocol),
) -> schemas.EliteNetwork:
    """One-hop ego graph around the elite."""
    return await elites.get_network(elite_id)
