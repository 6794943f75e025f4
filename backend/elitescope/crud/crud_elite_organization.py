"""CRUD operations for elite organization affiliations."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from elitescope.crud._base import CRUDBase
from elitescope.models.elite_organization import EliteOrganization


class CRUDEliteOrganization(CRUDBase[EliteOrganization]):
    """CRUD operations for elite organization affiliations."""

    async def get_for_elite(
        self, db: AsyncSession, elite_id: int, is_current: Optional[str] = None
    ) -> List[EliteOrganization]:
        """Get affiliations of an elite, optionally only current or past ones.

        Args:
            db: Database session
            elite_id: Elite to look up
            is_current: ``"yes"`` or ``"no"``; None returns both

        Returns:
            Affiliation rows ordered by id
        """
        stmt = select(EliteOrganization).where(EliteOrganization.elite_id == elite_id)
        if is_current is not None:
            stmt = stmt.where(EliteOrganization.is_current == is_current)
        result = await db.execute(stmt.order_by(EliteOrganization.id))
        return list(result.scalars().all())


elite_organization = CRUDEliteOrganization(EliteOrganization)
