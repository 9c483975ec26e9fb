"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
"""

from .entity import UNSAVED_ID, Entity, EntityId
from .exceptions import DomainError, EntityNotFoundError, ValidationError
from .value_object import ValueObject

__all__ = [
    "UNSAVED_ID",
    "DomainError",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "ValidationError",
    "ValueObject",
]
