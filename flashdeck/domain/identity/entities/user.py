"""User entity for identity management."""

import re
from dataclasses import dataclass
from datetime import UTC, datetime

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects.ids import UserId

# Shape check only (local@domain.tld), not RFC 5322
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _check_email(email: str) -> None:
    if not email or not EMAIL_PATTERN.match(email):
        raise ValidationError("Invalid email address", field="email", value=email)


def _check_name(name: str) -> None:
    if not name or not name.strip():
        raise ValidationError("Name cannot be empty", field="name", value=name)


@dataclass
class User(Entity[UserId]):
    """
    User entity.

    Business Rules:
    - Email must look like local@domain.tld
    - Name cannot be empty or whitespace
    - Email must be unique (enforced by the use cases, not by storage)
    - created_at is set once; updated_at is stamped by every mutation
    """

    id: UserId
    email: str
    name: str
    created_at: datetime
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        _check_email(self.email)
        _check_name(self.name)

    def update_email(self, new_email: str) -> None:
        """
        Update the user's email address.

        Args:
            new_email: The new email address

        Raises:
            ValidationError: If email is malformed
        """
        new_email = new_email.strip() if new_email else new_email
        _check_email(new_email)
        self.email = new_email
        self.updated_at = datetime.now(UTC)

    def update_name(self, new_name: str) -> None:
        """
        Update the user's display name.

        Raises:
            ValidationError: If name is empty
        """
        _check_name(new_name)
        self.name = new_name.strip()
        self.updated_at = datetime.now(UTC)

    @classmethod
    def create(cls, email: str, name: str) -> "User":
        """
        Create a new user (id is a placeholder until persisted).

        Raises:
            ValidationError: If email or name is invalid
        """
        return cls(
            id=UserId.generate(),
            email=email.strip() if email else email,
            name=name.strip() if name else name,
            created_at=datetime.now(UTC),
        )

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        email: str,
        name: str,
        created_at: datetime,
        updated_at: datetime | None = None,
    ) -> "User":
        """Reconstitute a user from persistence."""
        return cls(
            id=id,
            email=email,
            name=name,
            created_at=created_at,
            updated_at=updated_at,
        )
