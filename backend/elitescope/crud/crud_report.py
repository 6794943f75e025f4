"""CRUD operations for reports."""

from typing import Collection, List

from sqlalchemy.ext.asyncio import AsyncSession

from elitescope.crud._base import CRUDBase
from elitescope.crud._filters import SearchFilter
from elitescope.models.report import Report


class CRUDReport(CRUDBase[Report]):
    """CRUD operations for reports."""

    order_by = (Report.publish_date.desc(),)

    async def search_visible(
        self, db: AsyncSession, filters: SearchFilter, access_levels: Collection[str]
    ) -> List[Report]:
        """List reports whose access level is in ``access_levels``."""
        return await self.search(db, filters, Report.access_level.in_(list(access_levels)))


report = CRUDReport(Report)
