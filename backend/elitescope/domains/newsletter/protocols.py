"""Protocols for the newsletter domain."""

from typing import Optional, Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from elitescope import schemas
from elitescope.models.newsletter_subscription import NewsletterSubscription


class NewsletterRepositoryProtocol(Protocol):
    """Data access for newsletter subscriptions."""

    async def upsert(
        self, db: AsyncSession, email: str, name: Optional[str] = None
    ) -> NewsletterSubscription:
        """Insert or reactivate the subscription for ``email``."""
        ...


class NewsletterServiceProtocol(Protocol):
    """Newsletter subscription operations."""

    async def subscribe(
        self, email: str, name: Optional[str] = None
    ) -> schemas.SuccessResponse:
        """Subscribe an email address."""
        ...
