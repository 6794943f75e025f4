"""User repository wrapping the crud singleton."""

from typing import Any, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from elitescope import crud
from elitescope.domains.users.protocols import UserRepositoryProtocol
from elitescope.models.user import User


class UserRepository(UserRepositoryProtocol):
    """Delegates to crud.user."""

    async def get_by_open_id(self, db: AsyncSession, open_id: str) -> Optional[User]:
        """Get a user by external identity."""
        return await crud.user.get_by_open_id(db, open_id)

    async def upsert(self, db: AsyncSession, *, open_id: str, values: Dict[str, Any]) -> User:
        """Insert or update the provided fields of a user."""
        return await crud.user.upsert(db, open_id=open_id, values=values)
