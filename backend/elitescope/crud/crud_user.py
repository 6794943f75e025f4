"""CRUD operations for users."""

from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from elitescope.crud._base import CRUDBase
from elitescope.models.user import User


class CRUDUser(CRUDBase[User]):
    """CRUD operations for users."""

    async def get_by_open_id(self, db: AsyncSession, open_id: str) -> Optional[User]:
        """Get a user by external identity."""
        result = await db.execute(select(User).where(User.open_id == open_id))
        return result.scalar_one_or_none()

    async def upsert(self, db: AsyncSession, *, open_id: str, values: Dict[str, Any]) -> User:
        """Insert a user or update the provided fields of the existing row.

        Only keys present in ``values`` are written on conflict; absent keys
        keep their stored value.
        """
        stmt = insert(User).values(open_id=open_id, **values)
        if values:
            stmt = stmt.on_conflict_do_update(
                index_elements=["open_id"],
                set_={key: stmt.excluded[key] for key in values},
            )
        else:
            stmt = stmt.on_conflict_do_update(
                index_elements=["open_id"], set_={"open_id": stmt.excluded.open_id}
            )
        result = await db.execute(stmt.returning(User))
        await db.commit()
        return result.scalar_one()


user = CRUDUser(User)
