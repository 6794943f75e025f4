"""Political decision endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Path, Query

from elitescope import schemas
from elitescope.api.deps import Inject
from elitescope.domains.decisions.protocols import DecisionServiceProtocol

router = APIRouter()


@router.get("", response_model=List[schemas.PoliticalDecision], summary="Search Decisions")
async def search(
    query: Optional[str] = Query(None, description="Substring of the title or description"),
    type: Optional[str] = Query(None, examples=["Executive Order"]),
    category: Optional[str] = Query(None),
    limit: Optional[int] = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    decisions: DecisionServiceProtocol = Inject(DecisionServiceProtocol),
) -> List[schemas.PoliticalDecision]:
    """Search decisions, newest enacted first."""
    return await decisions.search(
        query=query, type=type, category=category, limit=limit, offset=offset
    )


@router.get("/{decision_id}", response_model=schemas.PoliticalDecision, summary="Get Decision")
async def get(
    decision_id: int = Path(..., ge=1),
    decisions: DecisionServiceProtocol = Inject(DecisionServiceProtocol),
) -> schemas.PoliticalDecision:
    """Get one decision."""
    return await decisions.get(decision_id)


@router.get(
    "/{decision_id}/key-players",
    response_model=List[schemas.Elite],
    summary="Get Decision Key Players",
)
async def get_key_players(
    decision_id: int = Path(..., ge=1),
    decisions: DecisionServiceProtocol = Inject(DecisionServiceProtocol),
) -> List[schemas.Elite]:
    """Elites listed as key players of the decision, in their recorded order."""
    return await decisions.get_key_players(decision_id)
