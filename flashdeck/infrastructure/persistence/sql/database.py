"""Relational database handle.

One ``Database`` is created at startup, opened once, passed to every
relational repository, and closed at shutdown. There is no module-level
engine.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import structlog
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from flashdeck.exceptions import DatabaseNotInitializedError, PersistenceError
from flashdeck.infrastructure.persistence.sql.tables import metadata

logger = structlog.get_logger(__name__)


def _apply_sqlite_pragmas(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the SQLAlchemy async engine for the relational backend."""

    def __init__(self, url: str, *, echo: bool = False) -> None:
        self.url = url
        self.echo = echo
        self._engine: AsyncEngine | None = None

    @property
    def is_sqlite(self) -> bool:
        return make_url(self.url).get_backend_name() == "sqlite"

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def open(self) -> None:
        """Create the engine. Call once at process start."""
        if self._engine is not None:
            logger.info("database_already_open")
            return

        if self.is_sqlite:
            database = make_url(self.url).database
            if database and database != ":memory:":
                directory = Path(database).parent
                if not directory.exists():
                    directory.mkdir(parents=True, exist_ok=True)
                    logger.info("created_database_directory", path=str(directory))

            # Single shared connection for the whole process
            self._engine = create_async_engine(
                self.url,
                echo=self.echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
            event.listen(self._engine.sync_engine, "connect", _apply_sqlite_pragmas)
        else:
            self._engine = create_async_engine(
                self.url,
                echo=self.echo,
                pool_size=20,
                max_overflow=30,
                pool_pre_ping=True,
                pool_recycle=3600,
            )

        logger.info("database_opened", backend=make_url(self.url).get_backend_name())

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise DatabaseNotInitializedError("Relational")
        return self._engine

    async def create_schema(self) -> None:
        """Create all tables that do not exist yet."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(metadata.create_all)
        except SQLAlchemyError as e:
            logger.error("database_schema_failed", error=str(e))
            raise PersistenceError("Failed to initialize database schema") from e
        logger.info("database_schema_initialized", tables=sorted(metadata.tables))

    @asynccontextmanager
    async def begin(self) -> AsyncIterator[AsyncConnection]:
        """Yield a connection inside a transaction committed on exit."""
        async with self.engine.begin() as conn:
            yield conn

    async def close(self) -> None:
        """Dispose the engine. Call once at shutdown."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            logger.info("database_closed")
