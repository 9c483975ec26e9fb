"""Document-store implementation of the generic record repository."""

from collections.abc import Callable, Mapping
from typing import Any
from uuid import uuid4

import structlog
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from flashdeck.application.ports.crud_repository import (
    Record,
    RecordId,
    RecordSchema,
    check_page,
)
from flashdeck.exceptions import ConstraintViolationError, PersistenceError
from flashdeck.infrastructure.persistence.document.database import DocumentDatabase
from flashdeck.infrastructure.persistence.timestamps import from_storage, to_bson

logger = structlog.get_logger(__name__)

DOCUMENT_KEY = "_id"


def new_document_id() -> str:
    return uuid4().hex


class DocumentCrudRepository:
    """
    CRUD access to one collection keyed by string document ids.

    Callers may supply the identifier in ``create``; otherwise one is
    generated with ``id_factory``. Records are returned in the collection's
    natural order.
    """

    def __init__(
        self,
        database: DocumentDatabase,
        schema: RecordSchema,
        id_factory: Callable[[], str] = new_document_id,
    ) -> None:
        self.database = database
        self.schema = schema
        self.collection = database.collection(schema.name)
        self._id_factory = id_factory
        self._log = logger.bind(collection=schema.name)

    async def ensure_indexes(self) -> None:
        """Create indexes for the schema's lookup fields."""
        try:
            for name in sorted(self.schema.lookup_fields):
                await self.collection.create_index(name)
        except PyMongoError as e:
            raise self._failed("index", e) from e

    def _to_document(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return {
            name: to_bson(value) if name in self.schema.timestamp_fields else value
            for name, value in data.items()
        }

    def _to_record(self, document: Mapping[str, Any]) -> Record:
        record: Record = {self.schema.id_field: document[DOCUMENT_KEY]}
        for name in self.schema.fields:
            value = document.get(name)
            record[name] = from_storage(value) if name in self.schema.timestamp_fields else value
        return record

    def _filter_for(self, field_name: str, value: Any) -> dict[str, Any]:
        if field_name == self.schema.id_field:
            return {DOCUMENT_KEY: str(value)}
        if field_name in self.schema.timestamp_fields:
            value = to_bson(value)
        return {field_name: value}

    def _failed(self, operation: str, error: PyMongoError, **context: Any) -> PersistenceError:
        self._log.error(f"{operation}_failed", error=str(error), **context)
        if isinstance(error, DuplicateKeyError):
            return ConstraintViolationError(
                f"Constraint violated during {operation} on {self.schema.name}",
                collection=self.schema.name,
            )
        return PersistenceError(
            f"Failed to {operation} on {self.schema.name}", collection=self.schema.name
        )

    async def create(self, data: Mapping[str, Any]) -> Record:
        self.schema.check_fields(data, allow_id=True)
        fields = dict(data)
        record_id = fields.pop(self.schema.id_field, None)
        if record_id is None:
            record_id = self._id_factory()
        document = {DOCUMENT_KEY: str(record_id), **self._to_document(fields)}
        self._log.debug("record_create", id=document[DOCUMENT_KEY], fields=sorted(fields))
        try:
            await self.collection.insert_one(document)
        except PyMongoError as e:
            raise self._failed("create", e, id=document[DOCUMENT_KEY]) from e
        self._log.info("record_created", id=document[DOCUMENT_KEY])
        return self._to_record(document)

    async def get_by_id(self, record_id: RecordId) -> Record | None:
        try:
            document = await self.collection.find_one({DOCUMENT_KEY: str(record_id)})
        except PyMongoError as e:
            raise self._failed("get", e, id=record_id) from e
        return self._to_record(document) if document is not None else None

    async def get_all(self, limit: int | None = None, offset: int | None = None) -> list[Record]:
        check_page(limit, offset)
        # Mongo treats limit(0) as "no limit"
        if limit == 0:
            return []
        cursor = self.collection.find({}, skip=offset or 0, limit=limit or 0)
        try:
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise self._failed("list", e, limit=limit, offset=offset) from e
        self._log.debug("records_listed", count=len(documents))
        return [self._to_record(document) for document in documents]

    async def update(self, record_id: RecordId, data: Mapping[str, Any]) -> Record | None:
        if self.schema.id_field in data:
            self._log.warning("record_update_ignores_id", id=record_id)
            data = {k: v for k, v in data.items() if k != self.schema.id_field}
        self.schema.check_fields(data)
        if not data:
            self._log.warning("record_update_empty", id=record_id)
            return await self.get_by_id(record_id)

        try:
            document = await self.collection.find_one_and_update(
                {DOCUMENT_KEY: str(record_id)},
                {"$set": self._to_document(data)},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise self._failed("update", e, id=record_id) from e
        if document is None:
            return None
        self._log.info("record_updated", id=record_id)
        return self._to_record(document)

    async def delete(self, record_id: RecordId) -> bool:
        try:
            result = await self.collection.delete_one({DOCUMENT_KEY: str(record_id)})
        except PyMongoError as e:
            raise self._failed("delete", e, id=record_id) from e
        deleted = result.deleted_count > 0
        self._log.info("record_deleted" if deleted else "record_delete_missing", id=record_id)
        return deleted

    async def count(self) -> int:
        try:
            return await self.collection.count_documents({})
        except PyMongoError as e:
            raise self._failed("count", e) from e

    async def find_by(self, field_name: str, value: Any, limit: int | None = None) -> list[Record]:
        self.schema.check_lookup_field(field_name)
        check_page(limit, None)
        if limit == 0:
            return []
        cursor = self.collection.find(self._filter_for(field_name, value), limit=limit or 0)
        try:
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise self._failed("find", e, field=field_name) from e
        return [self._to_record(document) for document in documents]
