"""Educational resource repository wrapping crud.educational_resource."""

from typing import Collection, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from elitescope import crud
from elitescope.crud._filters import SearchFilter
from elitescope.domains.education.protocols import EducationalResourceRepositoryProtocol
from elitescope.models.educational_resource import EducationalResource


class EducationalResourceRepository(EducationalResourceRepositoryProtocol):
    """Delegates to the crud.educational_resource singleton."""

    async def get(self, db: AsyncSession, id: int) -> Optional[EducationalResource]:
        """Get a resource by id."""
        return await crud.educational_resource.get(db, id)

    async def search_visible(
        self, db: AsyncSession, filters: SearchFilter, access_levels: Collection[str]
    ) -> List[EducationalResource]:
        """Resources within ``access_levels``."""
        return await crud.educational_resource.search_visible(db, filters, access_levels)
