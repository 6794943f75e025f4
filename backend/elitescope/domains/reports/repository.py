"""Report repository wrapping crud.report."""

from typing import Collection, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from elitescope import crud
from elitescope.crud._filters import SearchFilter
from elitescope.domains.reports.protocols import ReportRepositoryProtocol
from elitescope.models.report import Report


class ReportRepository(ReportRepositoryProtocol):
    """Delegates to the crud.report singleton."""

    async def get(self, db: AsyncSession, id: int) -> Optional[Report]:
        """Get a report by id."""
        return await crud.report.get(db, id)

    async def search_visible(
        self, db: AsyncSession, filters: SearchFilter, access_levels: Collection[str]
    ) -> List[Report]:
        """Reports within ``access_levels``, newest first."""
        return await crud.report.search_visible(db, filters, access_levels)

    async def count(self, db: AsyncSession) -> int:
        """Number of reports."""
        return await crud.report.count(db)
