"""Fake organization repository for testing."""

from typing import List, Optional

from elitescope.core.fakes.store import apply_filter
from elitescope.crud._filters import SearchFilter
from elitescope.models.organization import Organization


class FakeOrganizationRepository:
    """In-memory fake for OrganizationRepositoryProtocol."""

    def __init__(self) -> None:
        """Initialize with an empty store."""
        self._store: dict[int, Organization] = {}

    def seed(self, *organizations: Organization) -> None:
        """Seed organizations by id."""
        for organization in organizations:
            self._store[organization.id] = organization

    async def get(self, db, id: int) -> Optional[Organization]:
        """Return a seeded organization."""
        return self._store.get(id)

    async def search(self, db, filters: SearchFilter) -> List[Organization]:
        """Filter seeded organizations like crud.organization.search."""
        return apply_filter(
            self._store.values(),
            filters,
            text_fields=("name", "description"),
            sort_key=lambda o: o.name,
        )

    async def count(self, db) -> int:
        """Number of seeded organizations."""
        return len(self._store)
