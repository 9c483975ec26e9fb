"""Use case for user profile management."""

import structlog

from flashdeck.application.identity.protocols.user_repository import UserRepositoryProtocol
from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.identity.entities.user import User
from flashdeck.domain.identity.exceptions import EmailAlreadyExistsError, UserNotFoundError

logger = structlog.get_logger(__name__)


class UpdateUserUseCase:
    """Use case for user profile operations."""

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository

    async def update_user(
        self,
        user_id: str,
        email: str | None = None,
        name: str | None = None,
    ) -> User:
        """
        Update the user's profile.

        Args:
            user_id: ID of the user to update
            email: New email address (optional)
            name: New display name (optional)

        Returns:
            Updated user entity

        Raises:
            UserNotFoundError: If user is not found
            EmailAlreadyExistsError: If the new email belongs to another user
            ValidationError: If email or name is invalid
        """
        user = await self.user_repository.find_by_id(UserId(user_id))
        if not user:
            raise UserNotFoundError(user_id)

        if email is not None and email.strip() != user.email:
            existing = await self.user_repository.find_by_email(email.strip())
            if existing and existing.id != user.id:
                raise EmailAlreadyExistsError(email.strip())
            user.update_email(email)

        if name is not None:
            user.update_name(name)

        user = await self.user_repository.save(user)

        logger.info("user_profile_updated", user_id=user_id)

        return user
