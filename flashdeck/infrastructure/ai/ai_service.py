import structlog
from pydantic_ai import Agent
from pydantic_ai.exceptions import AgentRunError
from pydantic_ai.models import Model

from flashdeck.application.learning.protocols.ai_flashcard_service import AIFlashcardSuggestion
from flashdeck.domain.learning.entities.flashcard import Difficulty
from flashdeck.exceptions import AIServiceError
from flashdeck.infrastructure.ai.ai_agents import (
    FlashcardSuggestion,
    build_flashcard_prompt,
    get_flashcard_agent,
)

logger = structlog.get_logger(__name__)


class AIService:
    def __init__(self, model: Model) -> None:
        self.agent: Agent[None, FlashcardSuggestion] = get_flashcard_agent(model)

    async def generate_flashcard(self, topic: str, difficulty: Difficulty) -> AIFlashcardSuggestion:
        """
        Ask the model for one flashcard.

        Raises:
            AIServiceError: If the model call fails or returns unusable output
        """
        try:
            result = await self.agent.run(build_flashcard_prompt(topic, difficulty.value))
        except AgentRunError as e:
            logger.error("flashcard_generation_failed", topic=topic, error=str(e))
            raise AIServiceError("Failed to generate flashcard content") from e

        suggestion = result.output
        return AIFlashcardSuggestion(front=suggestion.front.strip(), back=suggestion.back.strip())
