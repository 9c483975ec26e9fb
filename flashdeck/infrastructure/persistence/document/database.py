"""Document database handle (MongoDB through Motor).

A ``DocumentDatabase`` wraps one client and one database name. It is built
once at startup, passed to every document repository, and closed at
shutdown.
"""

import structlog
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from flashdeck.exceptions import DatabaseNotInitializedError, PersistenceError

logger = structlog.get_logger(__name__)


class DocumentDatabase:
    """Owns the Motor client for the document backend."""

    def __init__(self, client: AsyncIOMotorClient, database_name: str) -> None:
        self._client: AsyncIOMotorClient | None = client
        self.database_name = database_name

    @classmethod
    def connect(
        cls, url: str, database_name: str, *, server_selection_timeout_ms: int = 5000
    ) -> "DocumentDatabase":
        """Create a client for url. Motor connects lazily on first operation."""
        client: AsyncIOMotorClient = AsyncIOMotorClient(
            url, serverSelectionTimeoutMS=server_selection_timeout_ms
        )
        logger.info("document_database_opened", database=database_name)
        return cls(client, database_name)

    @property
    def is_open(self) -> bool:
        return self._client is not None

    @property
    def database(self) -> AsyncIOMotorDatabase:
        if self._client is None:
            raise DatabaseNotInitializedError("Document")
        return self._client[self.database_name]

    def collection(self, name: str) -> AsyncIOMotorCollection:
        return self.database[name]

    async def ping(self) -> None:
        """
        Verify the server is reachable.

        Raises:
            PersistenceError: If the server does not answer
        """
        try:
            await self.database.command("ping")
        except PyMongoError as e:
            logger.error("document_database_unreachable", error=str(e))
            raise PersistenceError("Document database is unreachable") from e

    async def close(self) -> None:
        """Close the client. Call once at shutdown."""
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("document_database_closed", database=self.database_name)
