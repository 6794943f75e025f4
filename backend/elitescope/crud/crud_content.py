"""CRUD operations for ungated content: posts, events and publications."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from elitescope.crud._base import CRUDBase
from elitescope.models.event import Event
from elitescope.models.post import Post
from elitescope.models.publication import Publication


class CRUDPost(CRUDBase[Post]):
    """CRUD operations for posts."""

    order_by = (Post.publish_date.desc(),)

    async def get_by_slug(self, db: AsyncSession, slug: str) -> Optional[Post]:
        """Get a post by its unique slug."""
        result = await db.execute(select(Post).where(Post.slug == slug))
        return result.scalar_one_or_none()


class CRUDEvent(CRUDBase[Event]):
    """CRUD operations for events."""

    order_by = (Event.start_date.desc(),)


class CRUDPublication(CRUDBase[Publication]):
    """CRUD operations for publications."""

    order_by = (Publication.publication_date.desc().nulls_last(),)


post = CRUDPost(Post)
event = CRUDEvent(Event)
publication = CRUDPublication(Publication)
