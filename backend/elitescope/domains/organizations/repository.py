"""Organization repository wrapping crud.organization."""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from elitescope import crud
from elitescope.crud._filters import SearchFilter
from elitescope.domains.organizations.protocols import OrganizationRepositoryProtocol
from elitescope.models.organization import Organization


class OrganizationRepository(OrganizationRepositoryProtocol):
    """Delegates to the crud.organization singleton."""

    async def get(self, db: AsyncSession, id: int) -> Optional[Organization]:
        """Get an organization by id."""
        return await crud.organization.get(db, id)

    async def search(self, db: AsyncSession, filters: SearchFilter) -> List[Organization]:
        """Filtered listing ordered by name."""
        return await crud.organization.search(db, filters)

    async def count(self, db: AsyncSession) -> int:
        """Number of organizations."""
        return await crud.organization.count(db)
