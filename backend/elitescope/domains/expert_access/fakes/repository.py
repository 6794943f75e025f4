"""Fake expert access repository for testing."""

from datetime import datetime, timedelta
from typing import List, Optional

from elitescope.core.fakes.store import sort_rows
from elitescope.core.shared_models import ExpertAccessStatus
from elitescope.models.expert_access_request import ExpertAccessRequest


class FakeExpertAccessRepository:
    """In-memory fake for ExpertAccessRepositoryProtocol."""

    def __init__(self) -> None:
        """Initialize with an empty store."""
        self._store: dict[int, ExpertAccessRequest] = {}
        self._next_id = 1
        self._clock = datetime(2024, 1, 1)

    def seed(self, *requests: ExpertAccessRequest) -> None:
        """Seed requests by id."""
        for request in requests:
            self._store[request.id] = request
            self._next_id = max(self._next_id, request.id + 1)

    async def get(self, db, id: int) -> Optional[ExpertAccessRequest]:
        """Return a stored request."""
        return self._store.get(id)

    async def create(self, db, *, obj_in: dict) -> ExpertAccessRequest:
        """Store a pending request with a monotonically increasing created_at."""
        self._clock += timedelta(seconds=1)
        row = ExpertAccessRequest(
            id=self._next_id,
            created_at=self._clock,
            status=ExpertAccessStatus.PENDING.value,
            **obj_in,
        )
        self._store[row.id] = row
        self._next_id += 1
        return row

    async def get_multi(self, db, status: Optional[str] = None) -> List[ExpertAccessRequest]:
        """Stored requests newest first."""
        rows = [r for r in self._store.values() if status is None or r.status == status]
        return sort_rows(rows, lambda r: r.created_at, descending=True)

    async def review_pending(
        self,
        db,
        *,
        id: int,
        status: str,
        reviewed_by: Optional[int],
        reviewed_at: datetime,
    ) -> Optional[ExpertAccessRequest]:
        """Update only when the request exists and is pending."""
        row = self._store.get(id)
        if row is None or row.status != ExpertAccessStatus.PENDING.value:
            return None
        row.status = status
        row.reviewed_by = reviewed_by
        row.reviewed_at = reviewed_at
        return row
