"""Use case for registering a new user."""

import structlog

from flashdeck.application.identity.protocols.user_repository import UserRepositoryProtocol
from flashdeck.domain.identity.entities.user import User
from flashdeck.domain.identity.exceptions import EmailAlreadyExistsError

logger = structlog.get_logger(__name__)


class CreateUserUseCase:
    """Use case for creating users."""

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository

    async def create_user(self, email: str, name: str) -> User:
        """
        Create a new user.

        Args:
            email: User's email address
            name: User's display name

        Returns:
            Created user entity with its assigned id

        Raises:
            ValidationError: If email or name is invalid
            EmailAlreadyExistsError: If another user already has this email
        """
        user = User.create(email=email, name=name)

        if await self.user_repository.find_by_email(user.email):
            raise EmailAlreadyExistsError(user.email)

        user = await self.user_repository.save(user)

        logger.info("user_registered", user_id=user.id.value, email=user.email)

        return user
