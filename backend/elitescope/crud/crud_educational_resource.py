"""CRUD operations for educational resources."""

from typing import Collection, List

from sqlalchemy.ext.asyncio import AsyncSession

from elitescope.crud._base import CRUDBase
from elitescope.crud._filters import SearchFilter
from elitescope.models.educational_resource import EducationalResource


class CRUDEducationalResource(CRUDBase[EducationalResource]):
    """CRUD operations for educational resources."""

    order_by = (EducationalResource.created_at.desc(),)

    async def search_visible(
        self, db: AsyncSession, filters: SearchFilter, access_levels: Collection[str]
    ) -> List[EducationalResource]:
        """List resources whose access level is in ``access_levels``."""
        return await self.search(
            db, filters, EducationalResource.access_level.in_(list(access_levels))
        )


educational_resource = CRUDEducationalResource(EducationalResource)
