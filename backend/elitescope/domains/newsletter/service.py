"""Newsletter service."""

from typing import Optional

from elitescope import schemas
from elitescope.core.logging import logger
from elitescope.db.session import Database
from elitescope.domains.newsletter.protocols import (
    NewsletterRepositoryProtocol,
    NewsletterServiceProtocol,
)


class NewsletterService(NewsletterServiceProtocol):
    """Domain service for newsletter subscriptions."""

    def __init__(self, newsletter_repo: NewsletterRepositoryProtocol, database: Database) -> None:
        """Initialize with injected dependencies."""
        self._newsletter_repo = newsletter_repo
        self._database = database

    async def subscribe(
        self, email: str, name: Optional[str] = None
    ) -> schemas.SuccessResponse:
        """Subscribe ``email``; subscribing twice keeps a single active row.

        Raises:
            StorageUnavailableException: Storage is unconfigured or unreachable.
        """
        async with self._database.session() as db:
            subscription = await self._newsletter_repo.upsert(db, email.strip().lower(), name)
        logger.with_context(subscription_id=subscription.id).info("Newsletter subscription saved")
        return schemas.SuccessResponse()
