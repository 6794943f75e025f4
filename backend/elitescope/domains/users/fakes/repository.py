"""Fake user repository for testing."""

from typing import Any, Dict, Optional

from elitescope.core.shared_models import UserRole
from elitescope.models.user import User


class FakeUserRepository:
    """In-memory fake for UserRepositoryProtocol, keyed by open_id."""

    def __init__(self) -> None:
        """Initialize with an empty store."""
        self._by_open_id: dict[str, User] = {}
        self._next_id = 1

    def seed(self, *users: User) -> None:
        """Seed users by open_id."""
        for user in users:
            self._by_open_id[user.open_id] = user
            self._next_id = max(self._next_id, user.id + 1)

    async def get_by_open_id(self, db, open_id: str) -> Optional[User]:
        """Return a stored user."""
        return self._by_open_id.get(open_id)

    async def upsert(self, db, *, open_id: str, values: Dict[str, Any]) -> User:
        """Insert, or overwrite only the provided keys of the stored row."""
        existing = self._by_open_id.get(open_id)
        if existing is not None:
            for key, value in values.items():
                setattr(existing, key, value)
            return existing
        row = User(id=self._next_id, open_id=open_id, role=UserRole.USER.value)
        for key, value in values.items():
            setattr(row, key, value)
        self._next_id += 1
        self._by_open_id[open_id] = row
        return row
