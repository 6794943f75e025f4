"""Fake educational resource repository for testing."""

from typing import Collection, List, Optional

from elitescope.core.fakes.store import apply_filter
from elitescope.crud._filters import SearchFilter
from elitescope.models.educational_resource import EducationalResource


class FakeEducationalResourceRepository:
    """In-memory fake for EducationalResourceRepositoryProtocol."""

    def __init__(self) -> None:
        """Initialize with an empty store."""
        self._store: dict[int, EducationalResource] = {}

    def seed(self, *resources: EducationalResource) -> None:
        """Seed resources by id."""
        for resource in resources:
            self._store[resource.id] = resource

    async def get(self, db, id: int) -> Optional[EducationalResource]:
        """Return a seeded resource."""
        return self._store.get(id)

    async def search_visible(
        self, db, filters: SearchFilter, access_levels: Collection[str]
    ) -> List[EducationalResource]:
        """Seeded resources within ``access_levels``, newest first."""
        return apply_filter(
            self._store.values(),
            filters,
            sort_key=lambda r: r.created_at,
            descending=True,
            where=lambda r: r.access_level in access_levels,
        )
