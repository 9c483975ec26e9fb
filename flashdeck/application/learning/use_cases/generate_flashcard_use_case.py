"""Use case for AI-generated flashcards."""

import structlog

from flashdeck.application.identity.protocols.user_repository import UserRepositoryProtocol
from flashdeck.application.learning.protocols.ai_flashcard_service import (
    AIFlashcardServiceProtocol,
)
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.identity.exceptions import UserNotFoundError
from flashdeck.domain.learning.entities.flashcard import Difficulty, Flashcard
from flashdeck.exceptions import AIDisabledError

logger = structlog.get_logger(__name__)


class GenerateFlashcardUseCase:
    """Use case for generating a flashcard about a topic with the AI service."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        user_repository: UserRepositoryProtocol,
        ai_service: AIFlashcardServiceProtocol | None,
    ) -> None:
        """
        Initialize use case with dependencies.

        ``ai_service`` is None when no AI provider is configured.
        """
        self.flashcard_repository = flashcard_repository
        self.user_repository = user_repository
        self.ai_service = ai_service

    async def generate_flashcard(
        self, user_id: str, topic: str, difficulty: str | Difficulty
    ) -> Flashcard:
        """
        Generate and save a flashcard.

        Args:
            user_id: ID of the owning user
            topic: Subject the card should cover
            difficulty: easy, medium or hard

        Returns:
            Saved flashcard entity

        Raises:
            AIDisabledError: If no AI provider is configured
            ValidationError: If topic or difficulty is invalid, or the AI returned an empty side
            UserNotFoundError: If the user does not exist
            AIServiceError: If the AI provider fails
        """
        if self.ai_service is None:
            raise AIDisabledError

        level = Difficulty.parse(difficulty)
        if not topic or not topic.strip():
            raise ValidationError("Topic cannot be empty", field="topic", value=topic)

        user_id_vo = UserId(user_id)
        if not await self.user_repository.find_by_id(user_id_vo):
            raise UserNotFoundError(user_id)

        suggestion = await self.ai_service.generate_flashcard(topic.strip(), level)

        flashcard = Flashcard.create(
            user_id=user_id_vo,
            front=suggestion.front,
            back=suggestion.back,
            difficulty=level,
        )
        flashcard = await self.flashcard_repository.save(flashcard)

        logger.info(
            "flashcard_generated",
            flashcard_id=flashcard.id.value,
            user_id=user_id,
            difficulty=level.value,
        )

        return flashcard
