"""Health check endpoints."""

from fastapi import APIRouter, Response

from elitescope.api.deps import Inject
from elitescope.core.config import settings
from elitescope.core.health.protocols import HealthServiceProtocol
from elitescope.schemas.health import LivenessResponse, ReadinessResponse

router = APIRouter()


@router.get("")
async def health_check() -> dict[str, str]:
    """Check if the API is healthy.

    Returns:
    --------
        dict: A dictionary containing the status of the API.
    """
    return {"status": "healthy"}


@router.get("/live")
async def liveness() -> LivenessResponse:
    """Liveness probe, confirms the process is running."""
    return LivenessResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"model": ReadinessResponse}},
)
async def readiness(
    response: Response,
    health: HealthServiceProtocol = Inject(HealthServiceProtocol),
) -> ReadinessResponse:
    """Readiness probe.

    A ``degraded`` service (storage not configured) still answers 200; only
    ``not_ready`` turns into a 503.
    """
    result = await health.check_readiness(debug=settings.DEBUG)

    if result.status == "not_ready":
        response.status_code = 503
    return result
