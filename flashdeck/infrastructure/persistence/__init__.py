"""
Persistence adapters.

Two interchangeable backends implement the ``CrudRepository`` port:

- ``sql``: SQLAlchemy async engine, integer primary keys
- ``document``: MongoDB through Motor, string document ids
"""

from flashdeck.infrastructure.persistence.schemas import FLASHCARD_SCHEMA, USER_SCHEMA

__all__ = [
    "FLASHCARD_SCHEMA",
    "USER_SCHEMA",
]
