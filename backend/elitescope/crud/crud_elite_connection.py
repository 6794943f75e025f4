"""CRUD operations for elite connections.

Connections are undirected: a row is found from either endpoint.
"""

from typing import Iterable, List, TypeVar

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from elitescope.crud._base import CRUDBase
from elitescope.models.elite_connection import EliteConnection

RowT = TypeVar("RowT")


def dedupe_by_id(rows: Iterable[RowT]) -> List[RowT]:
    """Drop repeated rows (same ``id``), keeping the first occurrence."""
    seen: set = set()
    unique: List[RowT] = []
    for row in rows:
        if row.id in seen:
            continue
        seen.add(row.id)
        unique.append(row)
    return unique


class CRUDEliteConnection(CRUDBase[EliteConnection]):
    """CRUD operations for elite connections."""

    order_by = (EliteConnection.id.asc(),)

    async def get_for_elite(self, db: AsyncSession, elite_id: int) -> List[EliteConnection]:
        """Get every connection where ``elite_id`` is either endpoint.

        A self-loop or a join that returns a row twice still yields it once.
        """
        stmt = (
            select(EliteConnection)
            .where(
                or_(
                    EliteConnection.elite_id_1 == elite_id,
                    EliteConnection.elite_id_2 == elite_id,
                )
            )
            .order_by(EliteConnection.id)
        )
        result = await db.execute(stmt)
        return dedupe_by_id(result.scalars().all())


elite_connection = CRUDEliteConnection(EliteConnection)
