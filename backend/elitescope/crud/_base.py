"""Generic read operations over one model."""

from typing import Any, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import ColumnElement, and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from elitescope.crud._filters import LIKE_ESCAPE, SearchFilter, escape_like
from elitescope.models._base import Base

ModelType = TypeVar("ModelType", bound=Base)


class CRUDBase(Generic[ModelType]):
    """Read operations shared by every entity.

    Subclasses declare the columns searched by free text and the default
    ordering of listings.
    """

    text_columns: Sequence[str] = ()
    order_by: Sequence[Any] = ()

    def __init__(self, model: Type[ModelType]):
        """Bind the CRUD object to ``model``."""
        self.model = model

    async def get(self, db: AsyncSession, id: int) -> Optional[ModelType]:
        """Get a single row by id, or None."""
        return await db.get(self.model, id)

    async def count(self, db: AsyncSession) -> int:
        """Count all rows."""
        result = await db.execute(select(func.count()).select_from(self.model))
        return int(result.scalar_one())

    def build_conditions(self, filters: SearchFilter) -> List[ColumnElement[bool]]:
        """Translate ``filters`` into WHERE clauses."""
        conditions: List[ColumnElement[bool]] = []

        text = filters.text
        if text is not None and self.text_columns:
            pattern = f"%{escape_like(text)}%"
            conditions.append(
                or_(
                    *(
                        func.lower(getattr(self.model, column)).like(pattern, escape=LIKE_ESCAPE)
                        for column in self.text_columns
                    )
                )
            )

        for column, value in filters.active_exact.items():
            conditions.append(getattr(self.model, column) == value)

        return conditions

    def search_statement(
        self, filters: SearchFilter, *extra: ColumnElement[bool]
    ) -> Select:
        """Build the full SELECT for ``filters`` plus any extra conditions."""
        conditions = [*self.build_conditions(filters), *extra]
        stmt = select(self.model)
        if conditions:
            stmt = stmt.where(and_(*conditions))
        # id breaks ties so pagination is stable
        return (
            stmt.order_by(*self.order_by, self.model.id)
            .offset(filters.offset)
            .limit(filters.limit)
        )

    async def search(
        self, db: AsyncSession, filters: SearchFilter, *extra: ColumnElement[bool]
    ) -> List[ModelType]:
        """Run a filtered, ordered, paginated listing."""
        result = await db.execute(self.search_statement(filters, *extra))
        return list(result.scalars().all())
