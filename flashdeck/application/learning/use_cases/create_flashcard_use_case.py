"""Use case for adding a hand-written flashcard."""

import structlog

from flashdeck.application.identity.protocols.user_repository import UserRepositoryProtocol
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.identity.exceptions import UserNotFoundError
from flashdeck.domain.learning.entities.flashcard import Difficulty, Flashcard

logger = structlog.get_logger(__name__)


class CreateFlashcardUseCase:
    """Use case for creating flashcards from user input."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        user_repository: UserRepositoryProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository
        self.user_repository = user_repository

    async def create_flashcard(
        self,
        user_id: str,
        front: str,
        back: str,
        difficulty: str | Difficulty = Difficulty.MEDIUM,
    ) -> Flashcard:
        """
        Create a flashcard for a user.

        Args:
            user_id: ID of the owning user
            front: Prompt side
            back: Answer side
            difficulty: easy, medium or hard

        Returns:
            Saved flashcard entity

        Raises:
            UserNotFoundError: If the user does not exist
            ValidationError: If a side is empty or difficulty is invalid
        """
        user_id_vo = UserId(user_id)
        flashcard = Flashcard.create(
            user_id=user_id_vo, front=front, back=back, difficulty=difficulty
        )

        if not await self.user_repository.find_by_id(user_id_vo):
            raise UserNotFoundError(user_id)

        flashcard = await self.flashcard_repository.save(flashcard)

        logger.info("flashcard_created", flashcard_id=flashcard.id.value, user_id=user_id)

        return flashcard
