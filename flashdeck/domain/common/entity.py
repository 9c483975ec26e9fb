"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Example:
    @dataclass
    class User(Entity[UserId]):
        id: UserId
        email: str

        def update_email(self, new_email: str) -> None:
            self.email = new_email
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject

# Identifier of an entity that has not been persisted yet
UNSAVED_ID = ""


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Identifiers are opaque strings at the domain boundary. Relational storage
    hands out integers and document storage hands out arbitrary strings; the
    mappers convert both to ``str``.

    Example:
        user_id = UserId("42")
        flashcard_id = FlashcardId("42")
        # These are different types, preventing accidental mixing
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"{self.__class__.__name__} must wrap a string")

    def __str__(self) -> str:
        return self.value

    @property
    def is_unsaved(self) -> bool:
        """True until storage has assigned a real identifier."""
        return self.value == UNSAVED_ID

    @classmethod
    def generate(cls) -> Self:
        """Set placeholder id. The real id is assigned by storage."""
        return cls(UNSAVED_ID)

    def to_primitive(self) -> str:
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Mutable (state can change over time)
    - Have lifecycle (created, modified, deleted)

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
