"""Relational implementation of the generic record repository."""

from collections.abc import Mapping
from typing import Any

import structlog
from sqlalchemy import Row, Table, delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from flashdeck.application.ports.crud_repository import (
    Record,
    RecordId,
    RecordSchema,
    check_page,
)
from flashdeck.exceptions import ConstraintViolationError, PersistenceError
from flashdeck.infrastructure.persistence.sql.database import Database
from flashdeck.infrastructure.persistence.timestamps import from_storage, to_storage

logger = structlog.get_logger(__name__)

# Largest value a SQLite INTEGER primary key can hold
MAX_ROW_ID = 2**63 - 1
MAX_ROW_ID_DIGITS = len(str(MAX_ROW_ID))


class SqlCrudRepository:
    """
    CRUD access to one table with a backend-generated integer primary key.

    Statements are built with SQLAlchemy Core, so every value is bound as a
    parameter. Column names come from the schema allow-list, never from
    caller input.
    """

    def __init__(self, database: Database, table: Table, schema: RecordSchema) -> None:
        missing = schema.all_fields - set(table.columns.keys())
        if missing:
            raise ValueError(f"{schema.name}: columns missing from table: {sorted(missing)}")
        self.database = database
        self.table = table
        self.schema = schema
        self._pk = table.c[schema.id_field]
        self._log = logger.bind(collection=schema.name)

    def _coerce_id(self, record_id: RecordId) -> int | None:
        """Integer primary key for record_id, or None if it cannot name a row."""
        if isinstance(record_id, str):
            # Canonical form only: " 1 ", "+1", "1_0" and "01" never name a row
            if not (record_id.isascii() and record_id.isdigit()):
                return None
            if len(record_id) > MAX_ROW_ID_DIGITS or str(int(record_id)) != record_id:
                return None
            record_id = int(record_id)
        if not isinstance(record_id, int) or isinstance(record_id, bool):
            return None
        if not 0 < record_id <= MAX_ROW_ID:
            return None
        return record_id

    def _to_row(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return {
            name: to_storage(value) if name in self.schema.timestamp_fields else value
            for name, value in data.items()
        }

    def _to_record(self, row: Row[Any]) -> Record:
        mapping = row._mapping
        record: Record = {}
        for name in self.schema.all_fields:
            value = mapping[name]
            record[name] = from_storage(value) if name in self.schema.timestamp_fields else value
        return record

    def _failed(self, operation: str, error: SQLAlchemyError, **context: Any) -> PersistenceError:
        self._log.error(f"{operation}_failed", error=str(error), **context)
        if isinstance(error, IntegrityError):
            return ConstraintViolationError(
                f"Constraint violated during {operation} on {self.schema.name}",
                collection=self.schema.name,
            )
        return PersistenceError(
            f"Failed to {operation} on {self.schema.name}", collection=self.schema.name
        )

    async def create(self, data: Mapping[str, Any]) -> Record:
        self.schema.check_fields(data)
        self._log.debug("record_create", fields=sorted(data))
        try:
            async with self.database.begin() as conn:
                result = await conn.execute(insert(self.table).values(self._to_row(data)))
                new_id = result.inserted_primary_key[0]
                row = (await conn.execute(select(self.table).where(self._pk == new_id))).one()
        except SQLAlchemyError as e:
            raise self._failed("create", e) from e
        self._log.info("record_created", id=new_id)
        return self._to_record(row)

    async def get_by_id(self, record_id: RecordId) -> Record | None:
        pk = self._coerce_id(record_id)
        if pk is None:
            return None
        try:
            async with self.database.begin() as conn:
                row = (await conn.execute(select(self.table).where(self._pk == pk))).one_or_none()
        except SQLAlchemyError as e:
            raise self._failed("get", e, id=record_id) from e
        return self._to_record(row) if row is not None else None

    async def get_all(self, limit: int | None = None, offset: int | None = None) -> list[Record]:
        check_page(limit, offset)
        stmt = select(self.table).order_by(self._pk)
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        try:
            async with self.database.begin() as conn:
                rows = (await conn.execute(stmt)).all()
        except SQLAlchemyError as e:
            raise self._failed("list", e, limit=limit, offset=offset) from e
        self._log.debug("records_listed", count=len(rows))
        return [self._to_record(row) for row in rows]

    async def update(self, record_id: RecordId, data: Mapping[str, Any]) -> Record | None:
        if self.schema.id_field in data:
            self._log.warning("record_update_ignores_id", id=record_id)
            data = {k: v for k, v in data.items() if k != self.schema.id_field}
        self.schema.check_fields(data)
        if not data:
            self._log.warning("record_update_empty", id=record_id)
            return await self.get_by_id(record_id)

        pk = self._coerce_id(record_id)
        if pk is None:
            return None
        try:
            async with self.database.begin() as conn:
                result = await conn.execute(
                    update(self.table).where(self._pk == pk).values(self._to_row(data))
                )
                if result.rowcount == 0:
                    return None
                row = (await conn.execute(select(self.table).where(self._pk == pk))).one()
        except SQLAlchemyError as e:
            raise self._failed("update", e, id=record_id) from e
        self._log.info("record_updated", id=pk)
        return self._to_record(row)

    async def delete(self, record_id: RecordId) -> bool:
        pk = self._coerce_id(record_id)
        if pk is None:
            return False
        try:
            async with self.database.begin() as conn:
                result = await conn.execute(delete(self.table).where(self._pk == pk))
        except SQLAlchemyError as e:
            raise self._failed("delete", e, id=record_id) from e
        deleted = result.rowcount > 0
        self._log.info("record_deleted" if deleted else "record_delete_missing", id=pk)
        return deleted

    async def count(self) -> int:
        try:
            async with self.database.begin() as conn:
                total = (await conn.execute(select(func.count()).select_from(self.table))).scalar()
        except SQLAlchemyError as e:
            raise self._failed("count", e) from e
        return total or 0

    async def find_by(self, field_name: str, value: Any, limit: int | None = None) -> list[Record]:
        self.schema.check_lookup_field(field_name)
        check_page(limit, None)
        if field_name in self.schema.timestamp_fields:
            value = to_storage(value)
        stmt = select(self.table).where(self.table.c[field_name] == value).order_by(self._pk)
        if limit is not None:
            stmt = stmt.limit(limit)
        try:
            async with self.database.begin() as conn:
                rows = (await conn.execute(stmt)).all()
        except SQLAlchemyError as e:
            raise self._failed("find", e, field=field_name) from e
        return [self._to_record(row) for row in rows]
