"""
Application ports (interfaces for external dependencies).

Ports define the boundaries between the application layer and
the infrastructure layer. They are interfaces that the infrastructure
layer must implement.

Types of ports:
- Repository ports: Data access interfaces
- Service ports: External service interfaces (AI)
"""

from .crud_repository import (
    CrudRepository,
    Record,
    RecordId,
    RecordSchema,
    check_page,
)

__all__ = [
    "CrudRepository",
    "Record",
    "RecordId",
    "RecordSchema",
    "check_page",
]
