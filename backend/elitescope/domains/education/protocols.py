"""Protocols for the education domain."""

from typing import Collection, List, Optional, Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from elitescope import schemas
from elitescope.crud._filters import SearchFilter
from elitescope.domains.access.policy import Requester
from elitescope.models.educational_resource import EducationalResource


class EducationalResourceRepositoryProtocol(Protocol):
    """Data access for educational resources."""

    async def get(self, db: AsyncSession, id: int) -> Optional[EducationalResource]:
        """Get a resource by id."""
        ...

    async def search_visible(
        self, db: AsyncSession, filters: SearchFilter, access_levels: Collection[str]
    ) -> List[EducationalResource]:
        """Resources within ``access_levels``, newest first."""
        ...


class EducationServiceProtocol(Protocol):
    """Tier-aware read operations over educational resources."""

    async def list(
        self,
        requester: Requester,
        *,
        resource_type: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[schemas.EducationalResource]:
        """Resources visible to the requester."""
        ...

    async def get(self, requester: Requester, resource_id: int) -> schemas.EducationalResource:
        """One resource, if the requester may read it."""
        ...
