"""Document storage backend (MongoDB through Motor)."""

from flashdeck.infrastructure.persistence.document.crud_repository import (
    DocumentCrudRepository,
    new_document_id,
)
from flashdeck.infrastructure.persistence.document.database import DocumentDatabase

__all__ = [
    "DocumentCrudRepository",
    "DocumentDatabase",
    "new_document_id",
]
