from .create_user_use_case import CreateUserUseCase
from .delete_user_use_case import DeleteUserUseCase
from .get_user_use_case import GetUserUseCase
from .list_users_use_case import ListUsersUseCase
from .update_user_use_case import UpdateUserUseCase

__all__ = [
    "CreateUserUseCase",
    "DeleteUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "UpdateUserUseCase",
]
