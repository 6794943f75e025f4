"""Database session configuration.

The :class:`Database` handle owns the async engine and session factory. It is
built once by the container factory and handed to repositories and health
probes; nothing in the codebase creates an engine at import time.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from elitescope.core.exceptions import StorageUnavailableException


def _connect_args(sslmode: str) -> dict:
    connect_args = {
        "server_settings": {
            # Kill idle transactions after 5 minutes
            "idle_in_transaction_session_timeout": "300000",
        },
        "command_timeout": 60,
    }
    if sslmode == "disable":
        connect_args["ssl"] = False
    return connect_args


class Database:
    """Handle on the configured storage backend.

    When constructed without a URI the handle is *unconfigured*: every attempt
    to open a session raises :class:`StorageUnavailableException`.
    """

    def __init__(
        self,
        uri: Optional[str],
        *,
        pool_size: int = 20,
        max_overflow: int = 40,
        sslmode: str = "prefer",
    ) -> None:
        """Create the engines for ``uri``, or an unconfigured handle when it is None."""
        self._engine: Optional[AsyncEngine] = None
        self._health_engine: Optional[AsyncEngine] = None
        self._sessionmaker: Optional[async_sessionmaker[AsyncSession]] = None

        if uri is None:
            return

        connect_args = _connect_args(sslmode)
        self._engine = create_async_engine(
            uri,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=300,  # Recycle connections after 5 minutes
            pool_timeout=30,
            isolation_level="READ COMMITTED",
            connect_args=connect_args,
        )
        self._sessionmaker = async_sessionmaker(
            bind=self._engine, autoflush=False, expire_on_commit=False
        )
        # Separate single-connection engine so a saturated app pool cannot
        # make the readiness probe fail.
        self._health_engine = create_async_engine(
            uri,
            pool_size=1,
            max_overflow=0,
            pool_pre_ping=True,
            pool_recycle=300,
            pool_timeout=10,
            connect_args=connect_args,
        )

    @property
    def is_configured(self) -> bool:
        """Whether a storage backend URI was provided."""
        return self._engine is not None

    @property
    def engine(self) -> Optional[AsyncEngine]:
        """Application engine, or None when unconfigured."""
        return self._engine

    @property
    def health_engine(self) -> Optional[AsyncEngine]:
        """Dedicated engine for health checks, or None when unconfigured."""
        return self._health_engine

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Open a session on the storage backend.

        Yields:
            AsyncSession: An async database session

        Raises:
            StorageUnavailableException: If storage is unconfigured or the
                connection to it fails.

        Example:
        -------
            async with database.session() as db:
                await db.execute(...)

        """
        if self._sessionmaker is None:
            raise StorageUnavailableException("No storage backend is configured")

        try:
            async with self._sessionmaker() as db:
                yield db
        except (OperationalError, InterfaceError, OSError) as e:
            raise StorageUnavailableException(f"Storage backend unreachable: {e}") from e

    async def dispose(self) -> None:
        """Dispose both engines."""
        for engine in (self._engine, self._health_engine):
            if engine is not None:
                await engine.dispose()
