"""Protocols for the organizations domain."""

from typing import List, Optional, Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from elitescope import schemas
from elitescope.crud._filters import SearchFilter
from elitescope.models.organization import Organization


class OrganizationRepositoryProtocol(Protocol):
    """Data access for organization records."""

    async def get(self, db: AsyncSession, id: int) -> Optional[Organization]:
        """Get an organization by id."""
        ...

    async def search(self, db: AsyncSession, filters: SearchFilter) -> List[Organization]:
        """Filtered listing ordered by name."""
        ...

    async def count(self, db: AsyncSession) -> int:
        """Number of organizations."""
        ...


class OrganizationServiceProtocol(Protocol):
    """Read operations over organizations."""

    async def search(
        self,
        *,
        query: Optional[str] = None,
        type: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[schemas.Organization]:
        """Search organizations."""
        ...

    async def get(self, organization_id: int) -> schemas.Organization:
        """Get one organization or raise OrganizationNotFoundError."""
        ...
