"""Use case for fetching a single user."""

from flashdeck.application.identity.protocols.user_repository import UserRepositoryProtocol
from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.identity.entities.user import User
from flashdeck.domain.identity.exceptions import UserNotFoundError


class GetUserUseCase:
    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        self.user_repository = user_repository

    async def get_user(self, user_id: str) -> User:
        """
        Get a user by id.

        Raises:
            UserNotFoundError: If no user has this id
        """
        user = await self.user_repository.find_by_id(UserId(user_id))
        if not user:
            raise UserNotFoundError(user_id)
        return user
