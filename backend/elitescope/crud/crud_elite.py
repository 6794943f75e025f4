"""CRUD operations for elites."""

from typing import List, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from elitescope.crud._base import CRUDBase
from elitescope.models.elite import Elite


class CRUDElite(CRUDBase[Elite]):
    """CRUD operations for elites."""

    text_columns = ("name", "biography")
    order_by = (Elite.name.asc(),)

    async def get_all(self, db: AsyncSession) -> List[Elite]:
        """Get every elite ordered by name."""
        result = await db.execute(select(Elite).order_by(Elite.name.asc(), Elite.id))
        return list(result.scalars().all())

    async def get_many(self, db: AsyncSession, ids: Sequence[int]) -> List[Elite]:
        """Get the elites whose id is in ``ids`` (in no particular order)."""
        if not ids:
            return []
        result = await db.execute(select(Elite).where(Elite.id.in_(set(ids))))
        return list(result.scalars().all())


elite = CRUDElite(Elite)
