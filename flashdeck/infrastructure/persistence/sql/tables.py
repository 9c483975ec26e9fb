"""Relational table definitions.

Tables are plain SQLAlchemy Core tables; the entity repositories map rows
to domain entities, so no ORM classes are declared.
"""

from sqlalchemy import Column, DateTime, Integer, MetaData, String, Table, Text

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("email", String(255), nullable=False, index=True),
    Column("name", String(255), nullable=False),
    Column("created_at", DateTime, nullable=False),
    Column("updated_at", DateTime, nullable=True),
)

flashcards = Table(
    "flashcards",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    # Not a foreign key: user references are not enforced by storage
    Column("user_id", String(64), nullable=False, index=True),
    Column("front", Text, nullable=False),
    Column("back", Text, nullable=False),
    Column("difficulty", String(16), nullable=False),
    Column("created_at", DateTime, nullable=False),
    Column("updated_at", DateTime, nullable=True),
)
