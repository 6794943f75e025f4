"""CRUD operations for newsletter subscriptions."""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from elitescope.core.shared_models import YesNo
from elitescope.crud._base import CRUDBase
from elitescope.models.newsletter_subscription import NewsletterSubscription


class CRUDNewsletterSubscription(CRUDBase[NewsletterSubscription]):
    """CRUD operations for newsletter subscriptions."""

    async def upsert(
        self, db: AsyncSession, email: str, name: Optional[str] = None
    ) -> NewsletterSubscription:
        """Subscribe ``email``, reactivating an existing row instead of duplicating it.

        Uses PostgreSQL INSERT ... ON CONFLICT on the unique email column, so
        concurrent subscriptions of the same address leave exactly one row.
        The name is only overwritten when a new one is supplied.
        """
        stmt = insert(NewsletterSubscription).values(
            email=email, name=name, is_active=YesNo.YES.value
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["email"],
            set_={
                "is_active": YesNo.YES.value,
                "name": func.coalesce(stmt.excluded.name, NewsletterSubscription.name),
            },
        ).returning(NewsletterSubscription)
        result = await db.execute(stmt)
        await db.commit()
        return result.scalar_one()


newsletter_subscription = CRUDNewsletterSubscription(NewsletterSubscription)
