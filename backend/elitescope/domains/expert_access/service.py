"""Expert access service.

Anyone may submit a request. Listing and reviewing are admin operations. A
review is a single conditional update, so a request is decided at most once;
approving a request does not change the requester's role.
"""

from datetime import datetime, timezone
from typing import List, Optional

from elitescope import schemas
from elitescope.core.events.expert_access import (
    ExpertAccessReviewedEvent,
    ExpertAccessSubmittedEvent,
)
from elitescope.core.logging import logger
from elitescope.core.protocols.event_bus import EventBus
from elitescope.core.shared_models import ExpertAccessStatus
from elitescope.db.session import Database
from elitescope.domains.access.policy import Requester, require_admin
from elitescope.domains.expert_access.exceptions import (
    ExpertAccessRequestAlreadyReviewedError,
    ExpertAccessRequestNotFoundError,
)
from elitescope.domains.expert_access.protocols import (
    ExpertAccessRepositoryProtocol,
    ExpertAccessServiceProtocol,
)


class ExpertAccessService(ExpertAccessServiceProtocol):
    """Domain service for expert access requests."""

    def __init__(
        self,
        expert_access_repo: ExpertAccessRepositoryProtocol,
        database: Database,
        event_bus: EventBus,
    ) -> None:
        """Initialize with injected dependencies."""
        self._expert_access_repo = expert_access_repo
        self._database = database
        self._event_bus = event_bus

    async def submit(
        self, requester: Requester, request_in: schemas.ExpertAccessRequestCreate
    ) -> schemas.SuccessResponse:
        """Store a new pending request linked to the requester's user, if any.

        Raises:
            StorageUnavailableException: Storage is unconfigured or unreachable.
        """
        obj_in = request_in.model_dump()
        obj_in["user_id"] = requester.user_id
        async with self._database.session() as db:
            created = await self._expert_access_repo.create(db, obj_in=obj_in)

        logger.with_context(request_id=created.id, user_id=requester.user_id).info(
            "Expert access request submitted"
        )
        await self._event_bus.publish(
            ExpertAccessSubmittedEvent(email=created.email, user_id=created.user_id)
        )
        return schemas.SuccessResponse()

    async def list(
        self, requester: Requester, *, status: Optional[ExpertAccessStatus] = None
    ) -> List[schemas.ExpertAccessRequest]:
        """Requests newest first, optionally with one status.

        Admin only. Storage errors propagate so that an empty moderation
        queue is never shown for an unreachable backend.
        """
        require_admin(requester)
        status_value = ExpertAccessStatus(status).value if status else None
        async with self._database.session() as db:
            rows = await self._expert_access_repo.get_multi(db, status_value)
            return [schemas.ExpertAccessRequest.model_validate(r) for r in rows]

    async def review(
        self, requester: Requester, request_id: int, status: ExpertAccessStatus
    ) -> schemas.ExpertAccessRequest:
        """Approve or reject a pending request.

        Raises:
            UnauthorizedException: Requester is not signed in.
            PermissionException: Requester is not an admin.
            ExpertAccessRequestNotFoundError: No such request.
            ExpertAccessRequestAlreadyReviewedError: Request is not pending.
        """
        require_admin(requester)
        target = ExpertAccessStatus(status)
        if target == ExpertAccessStatus.PENDING:
            raise ValueError("A review must approve or reject the request")

        async with self._database.session() as db:
            updated = await self._expert_access_repo.review_pending(
                db,
                id=request_id,
                status=target.value,
                reviewed_by=requester.user_id,
                reviewed_at=datetime.now(timezone.utc).replace(tzinfo=None),
            )
            if updated is None:
                existing = await self._expert_access_repo.get(db, request_id)
                if existing is None:
                    raise ExpertAccessRequestNotFoundError(request_id)
                raise ExpertAccessRequestAlreadyReviewedError(request_id, existing.status)
            result = schemas.ExpertAccessRequest.model_validate(updated)

        logger.with_context(request_id=request_id, reviewed_by=requester.user_id).info(
            f"Expert access request {target.value}"
        )
        await self._event_bus.publish(
            ExpertAccessReviewedEvent(
                request_id=result.id,
                status=result.status,
                reviewed_by=requester.user_id,
                requester_user_id=result.user_id,
            )
        )
        return result
