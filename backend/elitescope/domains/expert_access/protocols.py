"""Protocols for the expert access domain."""

from datetime import datetime
from typing import List, Optional, Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from elitescope import schemas
from elitescope.core.shared_models import ExpertAccessStatus
from elitescope.domains.access.policy import Requester
from elitescope.models.expert_access_request import ExpertAccessRequest


class ExpertAccessRepositoryProtocol(Protocol):
    """Data access for expert access requests."""

    async def get(self, db: AsyncSession, id: int) -> Optional[ExpertAccessRequest]:
        """Get a request by id."""
        ...

    async def create(self, db: AsyncSession, *, obj_in: dict) -> ExpertAccessRequest:
        """Insert a pending request."""
        ...

    async def get_multi(
        self, db: AsyncSession, status: Optional[str] = None
    ) -> List[ExpertAccessRequest]:
        """Requests newest first, optionally with one status."""
        ...

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
        ...


class ExpertAccessServiceProtocol(Protocol):
    """Submission and admin review of expert access requests."""

    async def submit(
        self, requester: Requester, request_in: schemas.ExpertAccessRequestCreate
    ) -> schemas.SuccessResponse:
        """Store a new pending request."""
        ...

    async def list(
        self, requester: Requester, *, status: Optional[ExpertAccessStatus] = None
    ) -> List[schemas.ExpertAccessRequest]:
        """List requests (admin only)."""
        ...

    async def review(
        self, requester: Requester, request_id: int, status: ExpertAccessStatus
    ) -> schemas.ExpertAccessRequest:
        """Approve or reject a pending request (admin only)."""
        ...
