"""Use case for removing a flashcard."""

import structlog

from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.domain.common.value_objects.ids import FlashcardId, UserId
from flashdeck.domain.learning.exceptions import FlashcardNotFoundError

logger = structlog.get_logger(__name__)


class DeleteFlashcardUseCase:
    def __init__(self, flashcard_repository: FlashcardRepositoryProtocol) -> None:
        self.flashcard_repository = flashcard_repository

    async def delete_flashcard(self, flashcard_id: str, user_id: str) -> None:
        """
        Delete a flashcard owned by the user.

        Raises:
            FlashcardNotFoundError: If flashcard not found or owned by another user
        """
        flashcard_id_vo = FlashcardId(flashcard_id)
        flashcard = await self.flashcard_repository.find_by_id(flashcard_id_vo)
        if not flashcard or flashcard.user_id != UserId(user_id):
            raise FlashcardNotFoundError(flashcard_id)

        if not await self.flashcard_repository.delete(flashcard_id_vo):
            raise FlashcardNotFoundError(flashcard_id)

        logger.info("deleted_flashcard", flashcard_id=flashcard_id, user_id=user_id)
