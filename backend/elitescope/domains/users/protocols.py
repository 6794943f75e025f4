"""Protocols for the users domain."""

from typing import Any, Dict, Optional, Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from elitescope import schemas
from elitescope.models.user import User


class UserRepositoryProtocol(Protocol):
    """Data access for users."""

    async def get_by_open_id(self, db: AsyncSession, open_id: str) -> Optional[User]:
        """Get a user by external identity."""
        ...

    async def upsert(self, db: AsyncSession, *, open_id: str, values: Dict[str, Any]) -> User:
        """Insert or update the provided fields of a user."""
        ...


class UserServiceProtocol(Protocol):
    """User identity operations."""

    async def upsert(self, user_in: schemas.UserUpsert) -> schemas.User:
        """Create or refresh a user on sign-in."""
        ...

    async def get_by_open_id(self, open_id: str) -> Optional[schemas.User]:
        """Look up a user, or None."""
        ...
