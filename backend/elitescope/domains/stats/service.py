"""Stats service."""

from elitescope import schemas
from elitescope.db.availability import degrade_when_unavailable
from elitescope.db.session import Database
from elitescope.domains.decisions.protocols import DecisionRepositoryProtocol
from elitescope.domains.elites.protocols import EliteRepositoryProtocol
from elitescope.domains.organizations.protocols import OrganizationRepositoryProtocol
from elitescope.domains.reports.protocols import ReportRepositoryProtocol
from elitescope.domains.stats.protocols import StatsServiceProtocol


class StatsService(StatsServiceProtocol):
    """Counts rows across the catalog repositories."""

    def __init__(
        self,
        elite_repo: EliteRepositoryProtocol,
        organization_repo: OrganizationRepositoryProtocol,
        decision_repo: DecisionRepositoryProtocol,
        report_repo: ReportRepositoryProtocol,
        database: Database,
    ) -> None:
        """Initialize with injected dependencies."""
        self._elite_repo = elite_repo
        self._organization_repo = organization_repo
        self._decision_repo = decision_repo
        self._report_repo = report_repo
        self._database = database

    async def get(self) -> schemas.Stats:
        """Current counts, or zeros when storage is unavailable."""
        stats = await self._count()
        return stats if stats is not None else schemas.Stats()

    @degrade_when_unavailable(default=None)
    async def _count(self) -> schemas.Stats:
        async with self._database.session() as db:
            return schemas.Stats(
                elites=await self._elite_repo.count(db),
                organizations=await self._organization_repo.count(db),
                decisions=await self._decision_repo.count(db),
                reports=await self._report_repo.count(db),
            )
