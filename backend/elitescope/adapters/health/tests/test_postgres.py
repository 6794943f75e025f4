"""Unit tests for PostgresHealthProbe.

A live database is only exercised when POSTGRES_HOST is configured.
"""

import pytest

from elitescope.adapters.health.postgres import PostgresHealthProbe
from elitescope.core.config import settings
from elitescope.db.session import Database
from elitescope.schemas.health import CheckStatus


@pytest.mark.asyncio
async def test_unconfigured_database_is_skipped():
    probe = PostgresHealthProbe(Database(None))

    result = await probe.check()

    assert probe.name == "postgres"
    assert result.status == CheckStatus.skipped


@pytest.mark.asyncio
@pytest.mark.skipif(not settings.storage_configured, reason="no postgres configured")
async def test_configured_database_is_up():
    database = Database(str(settings.SQLALCHEMY_ASYNC_DATABASE_URI))
    try:
        result = await PostgresHealthProbe(database).check()
    finally:
        await database.dispose()

    assert result.status == CheckStatus.up
    assert result.latency_ms is not None
