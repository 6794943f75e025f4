"""CRUD operations for expert access requests."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from elitescope.core.shared_models import ExpertAccessStatus
from elitescope.crud._base import CRUDBase
from elitescope.models.expert_access_request import ExpertAccessRequest


class CRUDExpertAccessRequest(CRUDBase[ExpertAccessRequest]):
    """CRUD operations for expert access requests."""

    async def create(self, db: AsyncSession, *, obj_in: dict) -> ExpertAccessRequest:
        """Insert a new request; status is always pending."""
        db_obj = ExpertAccessRequest(**obj_in, status=ExpertAccessStatus.PENDING.value)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def get_multi(
        self, db: AsyncSession, status: Optional[str] = None
    ) -> List[ExpertAccessRequest]:
        """List requests newest first, optionally with one status."""
        stmt = select(ExpertAccessRequest)
        if status is not None:
            stmt = stmt.where(ExpertAccessRequest.status == status)
        stmt = stmt.order_by(ExpertAccessRequest.created_at.desc(), ExpertAccessRequest.id.desc())
        result = await db.execute(stmt)
        return list(result.scalars().all())

    async def review_pending(
        self,
        db: AsyncSession,
        *,
        id: int,
        status: str,
        reviewed_by: Optional[int],
        reviewed_at: datetime,
    ) -> Optional[ExpertAccessRequest]:
        """Move a pending request to ``status`` in one conditional UPDATE.

        Returns:
            The updated row, or None if the request does not exist or was
            already reviewed. Two concurrent reviews cannot both succeed.
        """
        stmt = (
            update(ExpertAccessRequest)
            .where(
                ExpertAccessRequest.id == id,
                ExpertAccessRequest.status == ExpertAccessStatus.PENDING.value,
            )
            .values(status=status, reviewed_by=reviewed_by, reviewed_at=reviewed_at)
            .returning(ExpertAccessRequest)
        )
        result = await db.execute(stmt)
        updated = result.scalar_one_or_none()
        await db.commit()
        return updated


expert_access_request = CRUDExpertAccessRequest(ExpertAccessRequest)
