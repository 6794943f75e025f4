"""User service."""

from datetime import datetime, timezone
from typing import Optional

from elitescope import schemas
from elitescope.core.logging import logger
from elitescope.core.shared_models import UserRole
from elitescope.db.availability import degrade_when_unavailable
from elitescope.db.session import Database
from elitescope.domains.users.protocols import UserRepositoryProtocol, UserServiceProtocol


class UserService(UserServiceProtocol):
    """Domain service for users."""

    def __init__(
        self,
        user_repo: UserRepositoryProtocol,
        database: Database,
        owner_open_id: Optional[str] = None,
    ) -> None:
        """Initialize with injected dependencies.

        Args:
            user_repo: User repository.
            database: Storage handle.
            owner_open_id: External identity that is made admin when it signs
                in without an explicit role.
        """
        self._user_repo = user_repo
        self._database = database
        self._owner_open_id = owner_open_id

    async def upsert(self, user_in: schemas.UserUpsert) -> schemas.User:
        """Create or refresh a user in one statement.

        Only the fields set to a value on ``user_in`` are written, so a sign-in
        without profile claims keeps the stored profile. ``last_signed_in``
        defaults to now.

        Raises:
            StorageUnavailableException: Storage is unconfigured or unreachable.
        """
        values = user_in.model_dump(exclude_unset=True, exclude_none=True, exclude={"open_id"})
        if values.get("role") is None:
            values.pop("role", None)
            if self._owner_open_id and user_in.open_id == self._owner_open_id:
                values["role"] = UserRole.ADMIN
        if values.get("last_signed_in") is None:
            values["last_signed_in"] = datetime.now(timezone.utc).replace(tzinfo=None)
        if "role" in values:
            values["role"] = UserRole(values["role"]).value

        async with self._database.session() as db:
            row = await self._user_repo.upsert(db, open_id=user_in.open_id, values=values)
            user = schemas.User.model_validate(row)

        logger.with_context(user_id=user.id).debug("User upserted")
        return user

    @degrade_when_unavailable(default=None)
    async def get_by_open_id(self, open_id: str) -> Optional[schemas.User]:
        """Look up a user by external identity."""
        async with self._database.session() as db:
            row = await self._user_repo.get_by_open_id(db, open_id)
            return schemas.User.model_validate(row) if row is not None else None
