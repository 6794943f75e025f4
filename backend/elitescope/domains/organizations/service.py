"""Organization service."""

from typing import List, Optional

from elitescope import schemas
from elitescope.crud._filters import SearchFilter
from elitescope.db.availability import degrade_when_unavailable
from elitescope.db.session import Database
from elitescope.domains.organizations.exceptions import OrganizationNotFoundError
from elitescope.domains.organizations.protocols import (
    OrganizationRepositoryProtocol,
    OrganizationServiceProtocol,
)


class OrganizationService(OrganizationServiceProtocol):
    """Domain service for organizations."""

    def __init__(
        self,
        organization_repo: OrganizationRepositoryProtocol,
        database: Database,
        default_limit: int = 50,
    ) -> None:
        """Initialize with injected dependencies."""
        self._organization_repo = organization_repo
        self._database = database
        self._default_limit = default_limit

    @degrade_when_unavailable(default=[])
    async def search(
        self,
        *,
        query: Optional[str] = None,
        type: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[schemas.Organization]:
        """Search organizations by name/description text and exact type."""
        filters = SearchFilter(
            query=query,
            exact={"type": type},
            limit=limit or self._default_limit,
            offset=offset,
        )
        async with self._database.session() as db:
            rows = await self._organization_repo.search(db, filters)
            return [schemas.Organization.model_validate(r) for r in rows]

    async def get(self, organization_id: int) -> schemas.Organization:
        """Get an organization by id."""
        organization = await self._fetch(organization_id)
        if organization is None:
            raise OrganizationNotFoundError(organization_id)
        return organization

    @degrade_when_unavailable(default=None)
    async def _fetch(self, organization_id: int) -> Optional[schemas.Organization]:
        async with self._database.session() as db:
            row = await self._organization_repo.get(db, organization_id)
            return schemas.Organization.model_validate(row) if row is not None else None
