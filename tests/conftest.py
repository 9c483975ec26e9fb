"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from datetime import UTC, datetime
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import mongomock
import pytest
import pytest_asyncio

from flashdeck.application.ports.crud_repository import CrudRepository, Record
from flashdeck.infrastructure.identity.repositories import UserRepository
from flashdeck.infrastructure.learning.repositories import FlashcardRepository
from flashdeck.infrastructure.persistence.document import DocumentCrudRepository, DocumentDatabase
from flashdeck.infrastructure.persistence.schemas import FLASHCARD_SCHEMA, USER_SCHEMA
from flashdeck.infrastructure.persistence.sql import Database, SqlCrudRepository, flashcards, users

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Whole seconds so the value survives BSON millisecond truncation unchanged
CREATED_AT = datetime(2024, 5, 17, 9, 30, 0, tzinfo=UTC)

# Motor collection methods that return awaitables
AWAITABLE_COLLECTION_METHODS = (
    "insert_one",
    "find_one",
    "find_one_and_update",
    "delete_one",
    "count_documents",
    "create_index",
    "index_information",
)

RecordStores = tuple[CrudRepository[Record], CrudRepository[Record]]


def user_data(email: str = "ada@example.com", name: str = "Ada") -> Record:
    """Writable user fields for record-level tests."""
    return {"email": email, "name": name, "created_at": CREATED_AT, "updated_at": None}


def _motor_collection(collection: mongomock.Collection) -> MagicMock:
    """Motor-shaped mock over an in-memory mongomock collection."""
    motor = MagicMock(name=f"collection:{collection.name}")
    for method in AWAITABLE_COLLECTION_METHODS:
        setattr(motor, method, AsyncMock(wraps=getattr(collection, method)))

    def find(*args: Any, **kwargs: Any) -> MagicMock:
        documents = list(collection.find(*args, **kwargs))
        return MagicMock(to_list=AsyncMock(return_value=documents))

    motor.find = MagicMock(side_effect=find)
    return motor


def _motor_client(client: mongomock.MongoClient) -> MagicMock:
    """Motor-shaped mock client: ``client[db][collection]`` backed by mongomock."""

    def database(name: str) -> MagicMock:
        mock_db = client[name]
        motor_db = MagicMock(name=f"database:{name}")
        motor_db.__getitem__.side_effect = lambda collection: _motor_collection(
            mock_db[collection]
        )
        motor_db.command = AsyncMock(wraps=mock_db.command)
        return motor_db

    motor_client = MagicMock(name="motor_client")
    motor_client.__getitem__.side_effect = database
    return motor_client


def make_document_database() -> DocumentDatabase:
    return DocumentDatabase(_motor_client(mongomock.MongoClient()), "flashdeck_test")


@pytest_asyncio.fixture
async def sql_database() -> AsyncGenerator[Database, None]:
    """Create a fresh in-memory database with all tables for each test."""
    database = Database(TEST_DATABASE_URL)
    database.open()
    await database.create_schema()
    try:
        yield database
    finally:
        await database.close()


@pytest.fixture
def document_database() -> DocumentDatabase:
    """Create a fresh in-memory document database for each test."""
    return make_document_database()


@pytest_asyncio.fixture(params=["sql", "document"])
async def record_stores(request: pytest.FixtureRequest) -> AsyncGenerator[RecordStores, None]:
    """User and flashcard record repositories sharing one database, for each backend."""
    if request.param == "document":
        document_database = make_document_database()
        yield (
            DocumentCrudRepository(document_database, USER_SCHEMA),
            DocumentCrudRepository(document_database, FLASHCARD_SCHEMA),
        )
        return

    database = Database(TEST_DATABASE_URL)
    database.open()
    await database.create_schema()
    try:
        yield (
            SqlCrudRepository(database, users, USER_SCHEMA),
            SqlCrudRepository(database, flashcards, FLASHCARD_SCHEMA),
        )
    finally:
        await database.close()


@pytest.fixture
def user_records(record_stores: RecordStores) -> CrudRepository[Record]:
    return record_stores[0]


@pytest.fixture
def flashcard_records(record_stores: RecordStores) -> CrudRepository[Record]:
    return record_stores[1]


@pytest.fixture
def user_repository(user_records: CrudRepository[Record]) -> UserRepository:
    return UserRepository(user_records)


@pytest.fixture
def flashcard_repository(flashcard_records: CrudRepository[Record]) -> FlashcardRepository:
    return FlashcardRepository(flashcard_records)
