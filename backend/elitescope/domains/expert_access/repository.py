"""Expert access repository wrapping the crud singleton."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from elitescope import crud
from elitescope.domains.expert_access.protocols import ExpertAccessRepositoryProtocol
from elitescope.models.expert_access_request import ExpertAccessRequest


class ExpertAccessRepository(ExpertAccessRepositoryProtocol):
    """Delegates to crud.expert_access_request."""

    async def get(self, db: AsyncSession, id: int) -> Optional[ExpertAccessRequest]:
        """Get a request by id."""
        return await crud.expert_access_request.get(db, id)

    async def create(self, db: AsyncSession, *, obj_in: dict) -> ExpertAccessRequest:
        """Insert a pending request."""
        return await crud.expert_access_request.create(db, obj_in=obj_in)

    async def get_multi(
        self, db: AsyncSession, status: Optional[str] = None
    ) -> List[ExpertAccessRequest]:
        """Requests newest first, optionally with one status."""
        return await crud.expert_access_request.get_multi(db, status)

    async def review_pending(
        self,
        db: AsyncSession,
        *,
        id: int,
        status: str,
        reviewed_by: Optional[int],
        reviewed_at: datetime,
    ) -> Optional[ExpertAccessRequest]:
        """Conditionally move a pending request to ``status``."""
        return await crud.expert_access_request.review_pending(
            db, id=id, status=status, reviewed_by=reviewed_by, reviewed_at=reviewed_at
        )
