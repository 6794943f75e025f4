"""Unit tests for the SQL produced by the CRUD layer.

Statements are compiled against the PostgreSQL dialect; no database is used.
"""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import postgresql

from elitescope import crud
from elitescope.crud._filters import SearchFilter, escape_like


def _sql(stmt) -> str:
    return str(stmt.compile(dialect=postgresql.dialect()))


def _params(stmt) -> dict:
    return stmt.compile(dialect=postgresql.dialect()).params


@pytest.fixture
def mock_db():
    """AsyncSession double that records executed statements."""
    db = MagicMock()
    db.execute = AsyncMock(return_value=MagicMock())
    db.commit = AsyncMock()
    return db


# ---------------------------------------------------------------------------
# SearchFilter
# ---------------------------------------------------------------------------


class TestSearchFilter:
    def test_blank_query_is_no_filter(self):
        assert SearchFilter(query="   ").text is None
        assert SearchFilter(query=None).text is None

    def test_query_is_trimmed_and_lowered(self):
        assert SearchFilter(query="  Wall Street ").text == "wall street"

    def test_empty_exact_values_are_ignored(self):
        filters = SearchFilter(exact={"type": "", "category": None, "status": "upcoming"})
        assert filters.active_exact == {"status": "upcoming"}

    def test_escape_like(self):
        assert escape_like("100%_a\\b") == "100\\%\\_a\\\\b"


# ---------------------------------------------------------------------------
# search statements
# ---------------------------------------------------------------------------


class TestSearchStatement:
    def test_text_is_ored_across_columns_and_escaped(self):
        stmt = crud.elite.search_statement(SearchFilter(query="50%", limit=10))

        sql = _sql(stmt)
        assert "lower(elites.name) LIKE" in sql
        assert "lower(elites.biography) LIKE" in sql
        assert " OR " in sql
        assert "ESCAPE" in sql
        assert "%50\\%%" in _params(stmt).values()

    def test_exact_filters_are_anded(self):
        stmt = crud.elite.search_statement(
            SearchFilter(exact={"sphere_of_influence": "Finance", "political_orientation": "Left"})
        )

        sql = _sql(stmt)
        assert "elites.sphere_of_influence = " in sql
        assert " AND " in sql
        assert "LIKE" not in sql

    def test_no_filters_has_no_where(self):
        sql = _sql(crud.organization.search_statement(SearchFilter()))

        assert "WHERE" not in sql
        assert "ORDER BY organizations.name ASC, organizations.id" in sql

    def test_pagination(self):
        stmt = crud.elite.search_statement(SearchFilter(limit=5, offset=15))

        values = list(_params(stmt).values())
        assert 5 in values
        assert 15 in values

    def test_reports_newest_first(self):
        sql = _sql(crud.report.search_statement(SearchFilter()))

        assert "ORDER BY reports.publish_date DESC, reports.id" in sql


# ---------------------------------------------------------------------------
# Writes and joins
# ---------------------------------------------------------------------------


class TestStatements:
    @pytest.mark.asyncio
    async def test_connections_match_either_endpoint(self, mock_db):
        mock_db.execute.return_value.scalars.return_value.all.return_value = []

        await crud.elite_connection.get_for_elite(mock_db, 3)

        sql = _sql(mock_db.execute.await_args.args[0])
        assert "elite_connections.elite_id_1 = " in sql
        assert " OR elite_connections.elite_id_2 = " in sql

    @pytest.mark.asyncio
    async def test_gated_listing_restricts_levels(self, mock_db):
        mock_db.execute.return_value.scalars.return_value.all.return_value = []

        await crud.report.search_visible(mock_db, SearchFilter(), ["public", "registered"])

        sql = _sql(mock_db.execute.await_args.args[0])
        assert "reports.access_level IN" in sql

    @pytest.mark.asyncio
    async def test_newsletter_upsert_is_on_conflict(self, mock_db):
        await crud.newsletter_subscription.upsert(mock_db, "a@example.com", None)

        sql = _sql(mock_db.execute.await_args.args[0])
        assert "ON CONFLICT (email) DO UPDATE" in sql
        assert "coalesce(excluded.name, newsletter_subscriptions.name)" in sql
        mock_db.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_user_upsert_only_sets_provided_keys(self, mock_db):
        await crud.user.upsert(
            mock_db, open_id="auth0|1", values={"email": "a@example.com", "role": "admin"}
        )

        sql = _sql(mock_db.execute.await_args.args[0])
        assert "ON CONFLICT (open_id) DO UPDATE SET" in sql
        assert "email = excluded.email" in sql
        assert "role = excluded.role" in sql
        assert "name = excluded.name" not in sql

    @pytest.mark.asyncio
    async def test_review_is_conditional_on_pending(self, mock_db):
        mock_db.execute.return_value.scalar_one_or_none.return_value = None

        result = await crud.expert_access_request.review_pending(
            mock_db,
            id=4,
            status="approved",
            reviewed_by=1,
            reviewed_at=datetime(2024, 1, 1),
        )

        stmt = mock_db.execute.await_args.args[0]
        sql = _sql(stmt)
        assert sql.startswith("UPDATE expert_access_requests SET")
        assert "expert_access_requests.status = " in sql
        assert "pending" in _params(stmt).values()
        assert result is None
