"""CRUD operations for political decisions."""

from elitescope.crud._base import CRUDBase
from elitescope.models.political_decision import PoliticalDecision


class CRUDPoliticalDecision(CRUDBase[PoliticalDecision]):
    """CRUD operations for political decisions."""

    text_columns = ("title", "description")
    order_by = (PoliticalDecision.date_enacted.desc().nulls_last(),)


political_decision = CRUDPoliticalDecision(PoliticalDecision)
