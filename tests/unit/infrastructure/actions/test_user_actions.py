"""Tests for user actions and their response envelopes."""

from unittest.mock import AsyncMock

import pytest

from flashdeck.application.identity.use_cases import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from flashdeck.exceptions import PersistenceError
from flashdeck.infrastructure.identity import actions
from flashdeck.infrastructure.identity.repositories import UserRepository


class TestUserActions:
    @pytest.mark.asyncio
    async def test_create_user_success(self, user_repository: UserRepository) -> None:
        response = await actions.create_user(
            CreateUserUseCase(user_repository), email="ada@example.com", name="Ada"
        )

        assert response.success
        assert response.error is None
        assert response.data is not None
        assert response.data.email == "ada@example.com"
        assert response.data.id

    @pytest.mark.asyncio
    async def test_create_user_duplicate_email(self, user_repository: UserRepository) -> None:
        use_case = CreateUserUseCase(user_repository)
        await actions.create_user(use_case, email="ada@example.com", name="Ada")

        response = await actions.create_user(use_case, email="ada@example.com", name="Ada 2")

        assert not response.success
        assert response.data is None
        assert response.error == "User with this email already exists"

    @pytest.mark.asyncio
    async def test_create_user_validation_message(self, user_repository: UserRepository) -> None:
        response = await actions.create_user(
            CreateUserUseCase(user_repository), email="nope", name="Ada"
        )

        assert response.model_dump() == {
            "success": False,
            "data": None,
            "error": "Invalid email address",
            "message": None,
        }

    @pytest.mark.asyncio
    async def test_persistence_failure_is_generic(self) -> None:
        use_case = AsyncMock(spec=CreateUserUseCase)
        use_case.create_user.side_effect = PersistenceError("disk on fire", collection="users")

        response = await actions.create_user(use_case, email="ada@example.com", name="Ada")

        assert not response.success
        assert response.error == "Failed to create user"

    @pytest.mark.asyncio
    async def test_get_user(self, user_repository: UserRepository) -> None:
        created = await actions.create_user(
            CreateUserUseCase(user_repository), email="ada@example.com", name="Ada"
        )
        assert created.data is not None

        found = await actions.get_user(GetUserUseCase(user_repository), created.data.id)
        missing = await actions.get_user(GetUserUseCase(user_repository), "424242")

        assert found.success
        assert found.data == created.data
        assert not missing.success
        assert missing.error == "User not found"

    @pytest.mark.asyncio
    async def test_list_users(self, user_repository: UserRepository) -> None:
        create = CreateUserUseCase(user_repository)
        for i in range(3):
            await actions.create_user(create, email=f"user{i}@example.com", name=f"U{i}")

        response = await actions.list_users(ListUsersUseCase(user_repository), page_size=2)

        assert response.success
        assert response.data is not None
        assert len(response.data.items) == 2
        assert response.data.total == 3
        assert response.data.total_pages == 2
        assert response.data.has_next
        assert not response.data.has_previous

    @pytest.mark.asyncio
    async def test_list_users_invalid_page(self, user_repository: UserRepository) -> None:
        response = await actions.list_users(ListUsersUseCase(user_repository), page=0)

        assert not response.success
        assert response.error == "Page must be at least 1"

    @pytest.mark.asyncio
    async def test_update_user(self, user_repository: UserRepository) -> None:
        created = await actions.create_user(
            CreateUserUseCase(user_repository), email="ada@example.com", name="Ada"
        )
        assert created.data is not None

        response = await actions.update_user(
            UpdateUserUseCase(user_repository), created.data.id, name="Countess"
        )

        assert response.success
        assert response.data is not None
        assert response.data.name == "Countess"
        assert response.data.updated_at is not None

    @pytest.mark.asyncio
    async def test_delete_user(self, user_repository: UserRepository) -> None:
        created = await actions.create_user(
            CreateUserUseCase(user_repository), email="ada@example.com", name="Ada"
        )
        assert created.data is not None
        delete = DeleteUserUseCase(user_repository)

        first = await actions.delete_user(delete, created.data.id)
        second = await actions.delete_user(delete, created.data.id)

        assert first.success
        assert first.message == "User deleted successfully"
        assert not second.success
        assert second.error == "User not found"
