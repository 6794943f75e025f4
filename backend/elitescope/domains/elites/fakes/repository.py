"""Fake elite repositories for testing."""

from typing import Any, List, Optional, Sequence

from elitescope.core.fakes.store import apply_filter, sort_rows
from elitescope.crud import dedupe_by_id
from elitescope.crud._filters import SearchFilter
from elitescope.models.elite import Elite
from elitescope.models.elite_connection import EliteConnection
from elitescope.models.elite_organization import EliteOrganization


class FakeEliteRepository:
    """In-memory fake for EliteRepositoryProtocol."""

    def __init__(self) -> None:
        """Initialize with an empty store."""
        self._store: dict[int, Elite] = {}
        self._calls: list[tuple[Any, ...]] = []

    def seed(self, *elites: Elite) -> None:
        """Seed elites by id."""
        for elite in elites:
            self._store[elite.id] = elite

    async def get(self, db, id: int) -> Optional[Elite]:
        """Return a seeded elite."""
        self._calls.append(("get", id))
        return self._store.get(id)

    async def search(self, db, filters: SearchFilter) -> List[Elite]:
        """Filter seeded elites like crud.elite.search."""
        self._calls.append(("search", filters))
        return apply_filter(
            self._store.values(),
            filters,
            text_fields=("name", "biography"),
            sort_key=lambda e: e.name,
        )

    async def get_all(self, db) -> List[Elite]:
        """All seeded elites ordered by name."""
        return sort_rows(self._store.values(), lambda e: e.name)

    async def get_many(self, db, ids: Sequence[int]) -> List[Elite]:
        """Seeded elites with the given ids."""
        return [self._store[i] for i in ids if i in self._store]

    async def count(self, db) -> int:
        """Number of seeded elites."""
        return len(self._store)


class FakeEliteConnectionRepository:
    """In-memory fake for EliteConnectionRepositoryProtocol."""

    def __init__(self) -> None:
        """Initialize with no connections."""
        self._rows: list[EliteConnection] = []

    def seed(self, *connections: EliteConnection) -> None:
        """Add connection rows (duplicates allowed, as from a join)."""
        self._rows.extend(connections)

    async def get_for_elite(self, db, elite_id: int) -> List[EliteConnection]:
        """Rows touching ``elite_id`` from either side, deduplicated by id."""
        touching = [r for r in self._rows if elite_id in (r.elite_id_1, r.elite_id_2)]
        return dedupe_by_id(sort_rows(touching, None))


class FakeEliteAffiliationRepository:
    """In-memory fake for EliteAffiliationRepositoryProtocol."""

    def __init__(self) -> None:
        """Initialize with no affiliations."""
        self._rows: list[EliteOrganization] = []

    def seed(self, *rows: EliteOrganization) -> None:
        """Add affiliation rows."""
        self._rows.extend(rows)

    async def get_for_elite(
        self, db, elite_id: int, is_current: Optional[str] = None
    ) -> List[EliteOrganization]:
        """Affiliations of one elite, optionally by current flag."""
        rows = [
            r
            for r in self._rows
            if r.elite_id == elite_id and (is_current is None or r.is_current == is_current)
        ]
        return sort_rows(rows, None)
