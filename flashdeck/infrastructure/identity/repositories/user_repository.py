"""Repository for User domain entities."""

import structlog

from flashdeck.application.ports.crud_repository import CrudRepository, Record
from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.identity.entities.user import User
from flashdeck.domain.identity.exceptions import UserNotFoundError
from flashdeck.infrastructure.identity.mappers.user_mapper import UserMapper

logger = structlog.get_logger(__name__)


class UserRepository:
    """Repository for User domain entities over any record backend."""

    def __init__(self, records: CrudRepository[Record]) -> None:
        self.records = records
        self.mapper = UserMapper()

    async def find_by_id(self, user_id: UserId) -> User | None:
        """
        Find a user by ID.

        Args:
            user_id: The user ID

        Returns:
            User entity if found, None otherwise
        """
        record = await self.records.get_by_id(user_id.value)
        return self.mapper.to_domain(record) if record else None

    async def find_by_email(self, email: str) -> User | None:
        """
        Find a user by email.

        Args:
            email: The user's email address

        Returns:
            User entity if found, None otherwise
        """
        records = await self.records.find_by("email", email, limit=1)
        return self.mapper.to_domain(records[0]) if records else None

    async def find_all(self, limit: int | None = None, offset: int | None = None) -> list[User]:
        records = await self.records.get_all(limit=limit, offset=offset)
        return [self.mapper.to_domain(record) for record in records]

    async def save(self, user: User) -> User:
        """
        Save a user entity.

        New users (placeholder id) are created; existing users are updated.

        Returns:
            Saved user entity with storage-assigned values

        Raises:
            UserNotFoundError: If an existing user vanished before the update
        """
        if user.id.is_unsaved:
            record = await self.records.create(self.mapper.to_record(user))
            logger.info("created_user", user_id=str(record["id"]))
            return self.mapper.to_domain(record)

        updated = await self.records.update(user.id.value, self.mapper.to_record(user))
        if updated is None:
            raise UserNotFoundError(user.id.value)
        logger.info("updated_user", user_id=user.id.value)
        return self.mapper.to_domain(updated)

    async def delete(self, user_id: UserId) -> bool:
        """
        Delete a user.

        Returns:
            True if deleted, False if not found
        """
        return await self.records.delete(user_id.value)

    async def count(self) -> int:
        return await self.records.count()
