"""Tests for document-store specific behaviour."""

import pytest

from flashdeck.exceptions import ConstraintViolationError, DatabaseNotInitializedError
from flashdeck.infrastructure.persistence.document import (
    DocumentCrudRepository,
    DocumentDatabase,
    new_document_id,
)
from flashdeck.infrastructure.persistence.schemas import FLASHCARD_SCHEMA, USER_SCHEMA
from tests.conftest import user_data


def test_new_document_ids_are_unique_hex() -> None:
    ids = {new_document_id() for _ in range(100)}

    assert len(ids) == 100
    assert all(len(i) == 32 for i in ids)


@pytest.mark.asyncio
async def test_create_uses_id_factory(document_database: DocumentDatabase) -> None:
    records = DocumentCrudRepository(document_database, USER_SCHEMA, id_factory=lambda: "fixed-id")

    created = await records.create(user_data())

    assert created["id"] == "fixed-id"
    assert await records.get_by_id("fixed-id") == created


@pytest.mark.asyncio
async def test_create_accepts_caller_supplied_id(document_database: DocumentDatabase) -> None:
    records = DocumentCrudRepository(document_database, USER_SCHEMA)

    created = await records.create({"id": "user-1", **user_data()})

    assert created["id"] == "user-1"


@pytest.mark.asyncio
async def test_duplicate_id_is_a_constraint_violation(document_database: DocumentDatabase) -> None:
    records = DocumentCrudRepository(document_database, USER_SCHEMA)
    await records.create({"id": "user-1", **user_data()})

    with pytest.raises(ConstraintViolationError):
        await records.create({"id": "user-1", **user_data(email="other@example.com")})


@pytest.mark.asyncio
async def test_documents_are_stored_under_mongo_key(document_database: DocumentDatabase) -> None:
    records = DocumentCrudRepository(document_database, USER_SCHEMA)
    created = await records.create(user_data())

    raw = await document_database.collection("users").find_one({"_id": created["id"]})

    assert raw is not None
    assert "id" not in raw
    assert raw["email"] == "ada@example.com"


@pytest.mark.asyncio
async def test_ensure_indexes_covers_lookup_fields(document_database: DocumentDatabase) -> None:
    records = DocumentCrudRepository(document_database, FLASHCARD_SCHEMA)

    await records.ensure_indexes()

    info = await document_database.collection("flashcards").index_information()
    indexed = {key for index in info.values() for key, _ in index["key"]}
    assert "user_id" in indexed


@pytest.mark.asyncio
async def test_closed_database_raises(document_database: DocumentDatabase) -> None:
    await document_database.close()

    assert not document_database.is_open
    with pytest.raises(DatabaseNotInitializedError):
        document_database.collection("users")
