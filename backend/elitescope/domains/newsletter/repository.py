"""Newsletter repository wrapping the crud singleton."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from elitescope import crud
from elitescope.domains.newsletter.protocols import NewsletterRepositoryProtocol
from elitescope.models.newsletter_subscription import NewsletterSubscription


class NewsletterRepository(NewsletterRepositoryProtocol):
    """Delegates to crud.newsletter_subscription."""

    async def upsert(
        self, db: AsyncSession, email: str, name: Optional[str] = None
    ) -> NewsletterSubscription:
        """Insert or reactivate the subscription for ``email``."""
        return await crud.newsletter_subscription.upsert(db, email, name)
