"""Relational storage backend (SQLAlchemy async engine)."""

from flashdeck.infrastructure.persistence.sql.crud_repository import SqlCrudRepository
from flashdeck.infrastructure.persistence.sql.database import Database
from flashdeck.infrastructure.persistence.sql.tables import flashcards, metadata, users

__all__ = [
    "Database",
    "SqlCrudRepository",
    "flashcards",
    "metadata",
    "users",
]
