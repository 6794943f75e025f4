"""Fake political decision repository for testing."""

from typing import List, Optional

from elitescope.core.fakes.store import apply_filter
from elitescope.crud._filters import SearchFilter
from elitescope.models.political_decision import PoliticalDecision


class FakeDecisionRepository:
    """In-memory fake for DecisionRepositoryProtocol."""

    def __init__(self) -> None:
        """Initialize with an empty store."""
        self._store: dict[int, PoliticalDecision] = {}

    def seed(self, *decisions: PoliticalDecision) -> None:
        """Seed decisions by id."""
        for decision in decisions:
            self._store[decision.id] = decision

    async def get(self, db, id: int) -> Optional[PoliticalDecision]:
        """Return a seeded decision."""
        return self._store.get(id)

    async def search(self, db, filters: SearchFilter) -> List[PoliticalDecision]:
        """Filter seeded decisions, newest enactment first."""
        return apply_filter(
            self._store.values(),
            filters,
            text_fields=("title", "description"),
            sort_key=lambda d: d.date_enacted,
            descending=True,
        )

    async def count(self, db) -> int:
        """Number of seeded decisions."""
        return len(self._store)
