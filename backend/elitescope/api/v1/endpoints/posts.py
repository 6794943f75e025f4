"""Blog post endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Query

from elitescope import schemas
from elitescope.api.deps import Inject
from elitescope.domains.content.protocols import PostServiceProtocol

router = APIRouter()


@router.get("", response_model=List[schemas.Post], summary="List Posts")
async def list(
    category: Optional[str] = Query(None),
    limit: Optional[int] = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    posts: PostServiceProtocol = Inject(PostServiceProtocol),
) -> List[schemas.Post]:
    """Posts, newest first."""
    return await posts.list(category=category, limit=limit, offset=offset)


@router.get("/{slug}", response_model=schemas.Post, summary="Get Post")
async def get_by_slug(
    slug: str,
    posts: PostServiceProtocol = Inject(PostServiceProtocol),
) -> schemas.Post:
    """Get one post by its slug."""
    return await posts.get_by_slug(slug)
