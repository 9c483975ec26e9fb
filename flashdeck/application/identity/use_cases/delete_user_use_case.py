"""Use case for removing a user."""

import structlog

from flashdeck.application.identity.protocols.user_repository import UserRepositoryProtocol
from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.identity.exceptions import UserNotFoundError

logger = structlog.get_logger(__name__)


class DeleteUserUseCase:
    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        self.user_repository = user_repository

    async def delete_user(self, user_id: str) -> None:
        """
        Delete a user.

        Flashcards owned by the user are left in place.

        Raises:
            UserNotFoundError: If no user has this id
        """
        if not await self.user_repository.delete(UserId(user_id)):
            raise UserNotFoundError(user_id)

        logger.info("user_deleted", user_id=user_id)
