"""Tests for flashcard actions and their response envelopes."""

from unittest.mock import AsyncMock

import pytest

from flashdeck.application.identity.use_cases import CreateUserUseCase
from flashdeck.application.learning.protocols import AIFlashcardSuggestion
from flashdeck.application.learning.use_cases import (
    CreateFlashcardUseCase,
    DeleteFlashcardUseCase,
    GenerateFlashcardUseCase,
    GetUserFlashcardsUseCase,
    UpdateFlashcardUseCase,
)
from flashdeck.exceptions import AIServiceError
from flashdeck.infrastructure.identity.repositories import UserRepository
from flashdeck.infrastructure.learning import actions
from flashdeck.infrastructure.learning.repositories import FlashcardRepository


@pytest.fixture
def ai_service() -> AsyncMock:
    service = AsyncMock()
    service.generate_flashcard.return_value = AIFlashcardSuggestion(front="2 + 2?", back="4")
    return service


async def _user_id(user_repository: UserRepository) -> str:
    user = await CreateUserUseCase(user_repository).create_user("ada@example.com", "Ada")
    return user.id.value


class TestFlashcardActions:
    @pytest.mark.asyncio
    async def test_generate_flashcard(
        self,
        user_repository: UserRepository,
        flashcard_repository: FlashcardRepository,
        ai_service: AsyncMock,
    ) -> None:
        user_id = await _user_id(user_repository)
        use_case = GenerateFlashcardUseCase(flashcard_repository, user_repository, ai_service)

        response = await actions.generate_flashcard(use_case, user_id, "arithmetic", "easy")

        assert response.success
        assert response.data is not None
        assert response.data.user_id == user_id
        assert response.data.front == "2 + 2?"
        assert response.data.difficulty == "easy"

    @pytest.mark.asyncio
    async def test_generate_flashcard_ai_failure(
        self,
        user_repository: UserRepository,
        flashcard_repository: FlashcardRepository,
        ai_service: AsyncMock,
    ) -> None:
        user_id = await _user_id(user_repository)
        ai_service.generate_flashcard.side_effect = AIServiceError("quota exceeded")
        use_case = GenerateFlashcardUseCase(flashcard_repository, user_repository, ai_service)

        response = await actions.generate_flashcard(use_case, user_id, "arithmetic", "easy")

        assert not response.success
        assert response.error == "Failed to generate flashcard"

    @pytest.mark.asyncio
    async def test_generate_flashcard_ai_disabled(
        self, user_repository: UserRepository, flashcard_repository: FlashcardRepository
    ) -> None:
        use_case = GenerateFlashcardUseCase(flashcard_repository, user_repository, None)

        response = await actions.generate_flashcard(use_case, "1", "arithmetic", "easy")

        assert response.error == "AI features are not enabled"

    @pytest.mark.asyncio
    async def test_flashcard_lifecycle(
        self, user_repository: UserRepository, flashcard_repository: FlashcardRepository
    ) -> None:
        user_id = await _user_id(user_repository)

        created = await actions.create_flashcard(
            CreateFlashcardUseCase(flashcard_repository, user_repository),
            user_id,
            front="Capital of Peru?",
            back="Lima",
        )
        assert created.data is not None
        assert created.data.difficulty == "medium"

        updated = await actions.update_flashcard(
            UpdateFlashcardUseCase(flashcard_repository),
            created.data.id,
            user_id,
            difficulty="hard",
        )
        assert updated.data is not None
        assert updated.data.difficulty == "hard"

        listed = await actions.list_flashcards(
            GetUserFlashcardsUseCase(flashcard_repository), user_id
        )
        assert listed.data is not None
        assert [card.id for card in listed.data] == [created.data.id]

        deleted = await actions.delete_flashcard(
            DeleteFlashcardUseCase(flashcard_repository), created.data.id, user_id
        )
        assert deleted.success

        listed = await actions.list_flashcards(
            GetUserFlashcardsUseCase(flashcard_repository), user_id
        )
        assert listed.data == []

    @pytest.mark.asyncio
    async def test_create_flashcard_validation_message(
        self, user_repository: UserRepository, flashcard_repository: FlashcardRepository
    ) -> None:
        user_id = await _user_id(user_repository)

        response = await actions.create_flashcard(
            CreateFlashcardUseCase(flashcard_repository, user_repository),
            user_id,
            front="",
            back="Lima",
        )

        assert not response.success
        assert response.error == "Flashcard front cannot be empty"

    @pytest.mark.asyncio
    async def test_update_missing_flashcard(
        self, flashcard_repository: FlashcardRepository
    ) -> None:
        response = await actions.update_flashcard(
            UpdateFlashcardUseCase(flashcard_repository), "424242", "1", front="Q"
        )

        assert response.error == "Flashcard not found"
