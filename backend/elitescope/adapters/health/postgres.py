"""Postgres health probe adapter."""

import time

from sqlalchemy import text

from elitescope.core.health.protocols import HealthProbe
from elitescope.db.session import Database
from elitescope.schemas.health import CheckStatus, DependencyCheck


class PostgresHealthProbe(HealthProbe):
    """Runs ``SELECT 1`` on the database's dedicated health engine.

    Reports ``skipped`` when no database is configured.
    """

    def __init__(self, database: Database) -> None:
        self._database = database

    @property
    def name(self) -> str:
        return "postgres"

    async def check(self) -> DependencyCheck:
        engine = self._database.health_engine
        if engine is None:
            return DependencyCheck(status=CheckStatus.skipped)
        start = time.perf_counter()
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        latency = (time.perf_counter() - start) * 1000
        return DependencyCheck(status=CheckStatus.up, latency_ms=round(latency, 2))
