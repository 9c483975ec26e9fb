"""Mapper for User record ↔ Domain conversion."""

from flashdeck.application.ports.crud_repository import Record
from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.identity.entities.user import User


class UserMapper:
    """Mapper for User record ↔ Domain conversion."""

    def to_domain(self, record: Record) -> User:
        """Convert a stored record to a domain entity."""
        return User.create_with_id(
            id=UserId(str(record["id"])),
            email=record["email"],
            name=record["name"],
            created_at=record["created_at"],
            updated_at=record["updated_at"],
        )

    def to_record(self, domain_entity: User) -> Record:
        """Convert a domain entity to writable record fields (no id)."""
        return {
            "email": domain_entity.email,
            "name": domain_entity.name,
            "created_at": domain_entity.created_at,
            "updated_at": domain_entity.updated_at,
        }
