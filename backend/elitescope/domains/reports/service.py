"""Report service."""

from typing import List, Optional

from elitescope import schemas
from elitescope.domains.access.gated import GatedContentService
from elitescope.domains.access.policy import Requester
from elitescope.domains.reports.exceptions import ReportNotFoundError
from elitescope.domains.reports.protocols import ReportServiceProtocol


class ReportService(GatedContentService[schemas.Report], ReportServiceProtocol):
    """Domain service for reports."""

    resource = "reports"
    schema = schemas.Report
    not_found = ReportNotFoundError

    async def list(
        self,
        requester: Requester,
        *,
        type: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[schemas.Report]:
        """Reports at or below the requester's tier, newest first."""
        return await self._list_visible(requester, self._filters({"type": type}, limit, offset))

    async def get(self, requester: Requester, report_id: int) -> schemas.Report:
        """Get a report the requester is allowed to read.

        Raises:
            ReportNotFoundError: No such report.
            UnauthorizedException: Gated report and anonymous requester.
            PermissionException: Report above the requester's tier.
        """
        return await self._get_checked(requester, report_id)
