"""Fake report repository for testing."""

from typing import Collection, List, Optional

from elitescope.core.fakes.store import apply_filter
from elitescope.crud._filters import SearchFilter
from elitescope.models.report import Report


class FakeReportRepository:
    """In-memory fake for ReportRepositoryProtocol."""

    def __init__(self) -> None:
        """Initialize with an empty store."""
        self._store: dict[int, Report] = {}
        self.requested_levels: list[frozenset] = []

    def seed(self, *reports: Report) -> None:
        """Seed reports by id."""
        for report in reports:
            self._store[report.id] = report

    async def get(self, db, id: int) -> Optional[Report]:
        """Return a seeded report."""
        return self._store.get(id)

    async def search_visible(
        self, db, filters: SearchFilter, access_levels: Collection[str]
    ) -> List[Report]:
        """Seeded reports within ``access_levels``, newest first."""
        self.requested_levels.append(frozenset(access_levels))
        return apply_filter(
            self._store.values(),
            filters,
            sort_key=lambda r: r.publish_date,
            descending=True,
            where=lambda r: r.access_level in access_levels,
        )

    async def count(self, db) -> int:
        """Number of seeded reports."""
        return len(self._store)
