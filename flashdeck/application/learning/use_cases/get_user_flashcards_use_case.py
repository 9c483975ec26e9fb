"""Use case for listing a user's flashcards."""

from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.learning.entities.flashcard import Flashcard


class GetUserFlashcardsUseCase:
    def __init__(self, flashcard_repository: FlashcardRepositoryProtocol) -> None:
        self.flashcard_repository = flashcard_repository

    async def get_user_flashcards(self, user_id: str) -> list[Flashcard]:
        """Return every flashcard owned by the user (empty for unknown users)."""
        return await self.flashcard_repository.find_by_user(UserId(user_id))
