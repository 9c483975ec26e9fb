"""Tests for identity use cases."""

import pytest

from flashdeck.application.common.pagination import Pagination
from flashdeck.application.identity.use_cases import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.identity.exceptions import EmailAlreadyExistsError, UserNotFoundError
from flashdeck.infrastructure.identity.repositories import UserRepository


class TestCreateUser:
    @pytest.mark.asyncio
    async def test_create_user(self, user_repository: UserRepository) -> None:
        user = await CreateUserUseCase(user_repository).create_user("ada@example.com", "Ada")

        assert not user.id.is_unsaved
        assert await user_repository.count() == 1

    @pytest.mark.asyncio
    async def test_duplicate_email_is_rejected(self, user_repository: UserRepository) -> None:
        use_case = CreateUserUseCase(user_repository)
        await use_case.create_user("ada@example.com", "Ada")

        with pytest.raises(EmailAlreadyExistsError, match="User with this email already exists"):
            await use_case.create_user(" ada@example.com ", "Other Ada")

        assert await user_repository.count() == 1

    @pytest.mark.asyncio
    async def test_invalid_input_is_not_saved(self, user_repository: UserRepository) -> None:
        with pytest.raises(ValidationError):
            await CreateUserUseCase(user_repository).create_user("bad-email", "Ada")

        assert await user_repository.count() == 0


class TestGetAndListUsers:
    @pytest.mark.asyncio
    async def test_get_user(self, user_repository: UserRepository) -> None:
        created = await CreateUserUseCase(user_repository).create_user("ada@example.com", "Ada")

        user = await GetUserUseCase(user_repository).get_user(created.id.value)

        assert user.email == "ada@example.com"

    @pytest.mark.asyncio
    async def test_get_missing_user_raises(self, user_repository: UserRepository) -> None:
        with pytest.raises(UserNotFoundError, match="User not found"):
            await GetUserUseCase(user_repository).get_user("424242")

    @pytest.mark.asyncio
    async def test_list_users_pages(self, user_repository: UserRepository) -> None:
        create = CreateUserUseCase(user_repository)
        for i in range(5):
            await create.create_user(f"user{i}@example.com", f"User {i}")

        result = await ListUsersUseCase(user_repository).list_users(
            Pagination(page=2, page_size=2)
        )

        assert len(result.items) == 2
        assert result.total == 5
        assert result.total_pages == 3
        assert result.has_next
        assert result.has_previous

    @pytest.mark.asyncio
    async def test_list_users_defaults_to_first_page(
        self, user_repository: UserRepository
    ) -> None:
        result = await ListUsersUseCase(user_repository).list_users()

        assert result.items == []
        assert result.total == 0
        assert result.total_pages == 0
        assert not result.has_next


class TestUpdateUser:
    @pytest.mark.asyncio
    async def test_update_name_and_email(self, user_repository: UserRepository) -> None:
        created = await CreateUserUseCase(user_repository).create_user("ada@example.com", "Ada")

        updated = await UpdateUserUseCase(user_repository).update_user(
            created.id.value, email="countess@example.com", name="Countess"
        )

        assert updated.email == "countess@example.com"
        assert updated.name == "Countess"
        assert updated.updated_at is not None

    @pytest.mark.asyncio
    async def test_keeping_own_email_is_allowed(self, user_repository: UserRepository) -> None:
        created = await CreateUserUseCase(user_repository).create_user("ada@example.com", "Ada")

        updated = await UpdateUserUseCase(user_repository).update_user(
            created.id.value, email="ada@example.com", name="Ada L."
        )

        assert updated.name == "Ada L."

    @pytest.mark.asyncio
    async def test_email_taken_by_another_user(self, user_repository: UserRepository) -> None:
        create = CreateUserUseCase(user_repository)
        await create.create_user("ada@example.com", "Ada")
        bea = await create.create_user("bea@example.com", "Bea")

        with pytest.raises(EmailAlreadyExistsError):
            await UpdateUserUseCase(user_repository).update_user(
                bea.id.value, email="ada@example.com"
            )

    @pytest.mark.asyncio
    async def test_update_missing_user(self, user_repository: UserRepository) -> None:
        with pytest.raises(UserNotFoundError):
            await UpdateUserUseCase(user_repository).update_user("424242", name="Ghost")


class TestDeleteUser:
    @pytest.mark.asyncio
    async def test_delete_user(self, user_repository: UserRepository) -> None:
        created = await CreateUserUseCase(user_repository).create_user("ada@example.com", "Ada")

        await DeleteUserUseCase(user_repository).delete_user(created.id.value)

        assert await user_repository.count() == 0

    @pytest.mark.asyncio
    async def test_delete_missing_user_raises(self, user_repository: UserRepository) -> None:
        with pytest.raises(UserNotFoundError):
            await DeleteUserUseCase(user_repository).delete_user("424242")
