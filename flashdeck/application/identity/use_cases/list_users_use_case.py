"""Use case for listing users page by page."""

from flashdeck.application.common.pagination import PaginatedResult, Pagination
from flashdeck.application.identity.protocols.user_repository import UserRepositoryProtocol
from flashdeck.domain.identity.entities.user import User


class ListUsersUseCase:
    """Use case for paginated user listings."""

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        self.user_repository = user_repository

    async def list_users(self, pagination: Pagination | None = None) -> PaginatedResult[User]:
        """
        List users in storage order.

        Args:
            pagination: Page to fetch (defaults to the first page)

        Returns:
            The requested page together with the total user count
        """
        pagination = pagination or Pagination()
        users = await self.user_repository.find_all(
            limit=pagination.limit, offset=pagination.offset
        )
        total = await self.user_repository.count()
        return PaginatedResult(items=users, total=total, pagination=pagination)
