"""
User actions.

Each action takes plain values plus the use case it drives and returns an
``ActionResponse``. Actions never raise.
"""

from flashdeck.application.common.pagination import Pagination
from flashdeck.application.identity.use_cases import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from flashdeck.infrastructure.common.errors import failure_response
from flashdeck.infrastructure.common.schemas import ActionResponse, PaginatedResponse
from flashdeck.infrastructure.identity.schemas import UserSchema


async def create_user(
    use_case: CreateUserUseCase, email: str, name: str
) -> ActionResponse[UserSchema]:
    """
    Create a user.

    Args:
        use_case: CreateUserUseCase wired at startup
        email: User's email address
        name: User's display name

    Returns:
        Envelope with the created user, or the reason it was rejected
    """
    try:
        user = await use_case.create_user(email=email, name=name)
        return ActionResponse(success=True, data=UserSchema.from_entity(user))
    except Exception as e:
        return failure_response(e, "Failed to create user")


async def get_user(use_case: GetUserUseCase, user_id: str) -> ActionResponse[UserSchema]:
    try:
        user = await use_case.get_user(user_id)
        return ActionResponse(success=True, data=UserSchema.from_entity(user))
    except Exception as e:
        return failure_response(e, "Failed to get user")


async def list_users(
    use_case: ListUsersUseCase, page: int = 1, page_size: int = 20
) -> ActionResponse[PaginatedResponse[UserSchema]]:
    """List users one page at a time."""
    try:
        pagination = Pagination(page=page, page_size=page_size)
    except ValueError as e:
        return ActionResponse(success=False, error=str(e))

    try:
        result = await use_case.list_users(pagination)
        page_data = PaginatedResponse[UserSchema](
            items=[UserSchema.from_entity(user) for user in result.items],
            total=result.total,
            page=pagination.page,
            page_size=pagination.page_size,
            total_pages=result.total_pages,
            has_next=result.has_next,
            has_previous=result.has_previous,
        )
        return ActionResponse(success=True, data=page_data)
    except Exception as e:
        return failure_response(e, "Failed to list users")


async def update_user(
    use_case: UpdateUserUseCase,
    user_id: str,
    email: str | None = None,
    name: str | None = None,
) -> ActionResponse[UserSchema]:
    """Change a user's email and/or name."""
    try:
        user = await use_case.update_user(user_id=user_id, email=email, name=name)
        return ActionResponse(success=True, data=UserSchema.from_entity(user))
    except Exception as e:
        return failure_response(e, "Failed to update user")


async def delete_user(use_case: DeleteUserUseCase, user_id: str) -> ActionResponse[None]:
    try:
        await use_case.delete_user(user_id)
        return ActionResponse(success=True, message="User deleted successfully")
    except Exception as e:
        return failure_response(e, "Failed to delete user")
