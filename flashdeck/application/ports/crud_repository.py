"""
Generic record repository port.

A ``CrudRepository`` gives backend-agnostic Create/Read/Update/Delete/Count
access to one collection of records that share a single identifier field.
Records are plain mappings of field name to scalar value. Entity
repositories sit on top and map records to domain entities.

Contract shared by every backend:

- ``get_by_id`` and ``update`` return ``None`` for a missing record and
  ``delete`` returns ``False``; absence is never an error.
- ``update`` with an empty field set performs no write and returns the
  current record.
- ``get_all`` honours ``limit`` and ``offset`` the same way on every backend.
- Returned records carry every schema field (missing values are ``None``)
  and timestamps as timezone-aware UTC datetimes.
- Failures raise ``PersistenceError`` immediately. Nothing is retried.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar

from flashdeck.exceptions import UnknownFieldError

Record = dict[str, Any]
RecordId = str | int

RecordT = TypeVar("RecordT", bound=Mapping[str, Any])


@dataclass(frozen=True)
class RecordSchema:
    """
    Allow-list of fields for one collection.

    Every field set passed to a backend is checked against the schema
    before a statement or query is built.

    Attributes:
        name: Table or collection name
        fields: Writable fields, excluding the identifier
        id_field: Name of the identifier field
        timestamp_fields: Fields holding datetimes (converted at the backend boundary)
        lookup_fields: Fields used for secondary-key lookups (indexed)
    """

    name: str
    fields: frozenset[str]
    id_field: str = "id"
    timestamp_fields: frozenset[str] = field(default_factory=frozenset)
    lookup_fields: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.id_field in self.fields:
            raise ValueError(f"{self.name}: id field '{self.id_field}' must not be writable")
        for extra in (self.timestamp_fields, self.lookup_fields):
            unknown = extra - self.fields
            if unknown:
                raise ValueError(f"{self.name}: fields not in schema: {sorted(unknown)}")

    @property
    def all_fields(self) -> frozenset[str]:
        """Writable fields plus the identifier."""
        return self.fields | {self.id_field}

    def check_fields(self, data: Mapping[str, Any], *, allow_id: bool = False) -> None:
        """
        Reject any field outside the allow-list.

        Raises:
            UnknownFieldError: If data contains fields the schema does not know
        """
        allowed = self.all_fields if allow_id else self.fields
        unknown = [name for name in data if name not in allowed]
        if unknown:
            raise UnknownFieldError(self.name, unknown)

    def check_lookup_field(self, name: str) -> None:
        """Reject secondary lookups over fields the schema does not know."""
        if name not in self.all_fields:
            raise UnknownFieldError(self.name, [name])


def check_page(limit: int | None, offset: int | None) -> None:
    """Validate pagination arguments shared by every backend."""
    if limit is not None and limit < 0:
        raise ValueError("limit must be non-negative")
    if offset is not None and offset < 0:
        raise ValueError("offset must be non-negative")


class CrudRepository(Protocol[RecordT]):
    """Protocol for generic record persistence."""

    schema: RecordSchema

    async def create(self, data: Mapping[str, Any]) -> RecordT:
        """
        Insert a new record.

        Args:
            data: Field values, without the identifier unless the backend
                accepts caller-supplied identifiers

        Returns:
            The stored record including its identifier

        Raises:
            UnknownFieldError: If data contains fields outside the schema
            ConstraintViolationError: If the backend rejects the write
            PersistenceError: On any other backend failure
        """
        ...

    async def get_by_id(self, record_id: RecordId) -> RecordT | None:
        """Return the record, or None when it does not exist."""
        ...

    async def get_all(self, limit: int | None = None, offset: int | None = None) -> list[RecordT]:
        """Return records in backend-native order, optionally paginated."""
        ...

    async def update(self, record_id: RecordId, data: Mapping[str, Any]) -> RecordT | None:
        """
        Apply the supplied fields to an existing record.

        Returns:
            The updated record, or None when it does not exist
        """
        ...

    async def delete(self, record_id: RecordId) -> bool:
        """Delete a record. Returns False if it did not exist."""
        ...

    async def count(self) -> int:
        """Count records in the collection."""
        ...

    async def find_by(self, field_name: str, value: Any, limit: int | None = None) -> list[RecordT]:
        """Return records whose field equals value."""
        ...
