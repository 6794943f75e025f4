"""Protocols for the reports domain."""

from typing import Collection, List, Optional, Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from elitescope import schemas
from elitescope.crud._filters import SearchFilter
from elitescope.domains.access.policy import Requester
from elitescope.models.report import Report


class ReportRepositoryProtocol(Protocol):
    """Data access for report records."""

    async def get(self, db: AsyncSession, id: int) -> Optional[Report]:
        """Get a report by id."""
        ...

    async def search_visible(
        self, db: AsyncSession, filters: SearchFilter, access_levels: Collection[str]
    ) -> List[Report]:
        """Reports within ``access_levels``, newest first."""
        ...

    async def count(self, db: AsyncSession) -> int:
        """Number of reports at any level."""
        ...


class ReportServiceProtocol(Protocol):
    """Tier-aware read operations over reports."""

    async def list(
        self,
        requester: Requester,
        *,
        type: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[schemas.Report]:
        """Reports visible to the requester."""
        ...

    async def get(self, requester: Requester, report_id: int) -> schemas.Report:
        """One report, if the requester may read it."""
        ...
