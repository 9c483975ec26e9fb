"""Use case for editing a flashcard."""

import structlog

from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.domain.common.value_objects.ids import FlashcardId, UserId
from flashdeck.domain.learning.entities.flashcard import Difficulty, Flashcard
from flashdeck.domain.learning.exceptions import FlashcardNotFoundError

logger = structlog.get_logger(__name__)


class UpdateFlashcardUseCase:
    """Use case for flashcard edits."""

    def __init__(self, flashcard_repository: FlashcardRepositoryProtocol) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository

    async def update_flashcard(
        self,
        flashcard_id: str,
        user_id: str,
        front: str | None = None,
        back: str | None = None,
        difficulty: str | Difficulty | None = None,
    ) -> Flashcard:
        """
        Update a flashcard owned by the user.

        Args:
            flashcard_id: ID of the flashcard to update
            user_id: ID of the user (for ownership verification)
            front: New prompt side (optional)
            back: New answer side (optional)
            difficulty: New difficulty (optional)

        Returns:
            Updated flashcard entity

        Raises:
            FlashcardNotFoundError: If flashcard not found or owned by another user
            ValidationError: If a side is empty or difficulty is invalid
        """
        flashcard = await self.flashcard_repository.find_by_id(FlashcardId(flashcard_id))
        if not flashcard or flashcard.user_id != UserId(user_id):
            raise FlashcardNotFoundError(flashcard_id)

        if front is not None or back is not None:
            flashcard.update_content(
                front if front is not None else flashcard.front,
                back if back is not None else flashcard.back,
            )

        if difficulty is not None:
            flashcard.update_difficulty(difficulty)

        flashcard = await self.flashcard_repository.save(flashcard)

        logger.info("updated_flashcard", flashcard_id=flashcard_id, user_id=user_id)

        return flashcard
