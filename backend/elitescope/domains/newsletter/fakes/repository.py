"""Fake newsletter repository for testing."""

from datetime import datetime, timezone
from typing import List, Optional

from elitescope.models.newsletter_subscription import NewsletterSubscription


class FakeNewsletterRepository:
    """In-memory fake for NewsletterRepositoryProtocol, keyed by email."""

    def __init__(self) -> None:
        """Initialize with an empty store."""
        self._by_email: dict[str, NewsletterSubscription] = {}
        self._next_id = 1

    async def upsert(self, db, email: str, name: Optional[str] = None) -> NewsletterSubscription:
        """Insert or reactivate, mirroring the ON CONFLICT upsert."""
        existing = self._by_email.get(email)
        if existing is not None:
            existing.is_active = "yes"
            if name is not None:
                existing.name = name
            return existing
        row = NewsletterSubscription(
            id=self._next_id,
            email=email,
            name=name,
            is_active="yes",
            subscribed_at=datetime.now(timezone.utc),
        )
        self._next_id += 1
        self._by_email[email] = row
        return row

    def rows(self) -> List[NewsletterSubscription]:
        """All stored subscriptions."""
        return list(self._by_email.values())
