"""Event endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Path, Query

from elitescope import schemas
from elitescope.api.deps import Inject
from elitescope.core.shared_models import EventStatus
from elitescope.domains.content.protocols import EventServiceProtocol

router = APIRouter()


@router.get("", response_model=List[schemas.Event], summary="List Events")
async def list(
    status: Optional[EventStatus] = Query(None),
    limit: Optional[int] = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    events: EventServiceProtocol = Inject(EventServiceProtocol),
) -> List[schemas.Event]:
    """Events, latest start first."""
    return await events.list(status=status, limit=limit, offset=offset)


@router.get("/{event_id}", response_model=schemas.Event, summary="Get Event")
async def get(
    event_id: int = Path(..., ge=1),
    events: EventServiceProtocol = Inject(EventServiceProtocol),
) -> schemas.Event:
    """Get one event."""
    return await events.get(event_id)
