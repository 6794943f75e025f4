"""Newsletter endpoints."""

from fastapi import APIRouter, Depends

from elitescope import schemas
from elitescope.api import deps
from elitescope.api.context import ApiContext
from elitescope.api.deps import Inject
from elitescope.domains.newsletter.protocols import NewsletterServiceProtocol

router = APIRouter()


@router.post(
    "/subscribe",
    response_model=schemas.SuccessResponse,
    summary="Subscribe to Newsletter",
    responses={503: {"description": "Storage backend is unavailable"}},
)
async def subscribe(
    body: schemas.NewsletterSubscribe,
    ctx: ApiContext = Depends(deps.get_context),
    newsletter: NewsletterServiceProtocol = Inject(NewsletterServiceProtocol),
) -> schemas.SuccessResponse:
    """Subscribe an email address. Subscribing again reactivates it."""
    ctx.logger.info("Newsletter subscription requested")
    return await newsletter.subscribe(body.email, body.name)
