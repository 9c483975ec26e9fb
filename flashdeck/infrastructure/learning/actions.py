"""Flashcard actions."""

from flashdeck.application.learning.use_cases import (
    CreateFlashcardUseCase,
    DeleteFlashcardUseCase,
    GenerateFlashcardUseCase,
    GetUserFlashcardsUseCase,
    UpdateFlashcardUseCase,
)
from flashdeck.infrastructure.common.errors import failure_response
from flashdeck.infrastructure.common.schemas import ActionResponse
from flashdeck.infrastructure.learning.schemas import FlashcardSchema


async def generate_flashcard(
    use_case: GenerateFlashcardUseCase, user_id: str, topic: str, difficulty: str
) -> ActionResponse[FlashcardSchema]:
    """
    Generate a flashcard about a topic with the AI service and save it.

    Args:
        use_case: GenerateFlashcardUseCase wired at startup
        user_id: ID of the owning user
        topic: Subject of the card
        difficulty: easy, medium or hard

    Returns:
        Envelope with the saved flashcard, or the reason generation failed
    """
    try:
        flashcard = await use_case.generate_flashcard(
            user_id=user_id, topic=topic, difficulty=difficulty
        )
        return ActionResponse(success=True, data=FlashcardSchema.from_entity(flashcard))
    except Exception as e:
        return failure_response(e, "Failed to generate flashcard")


async def create_flashcard(
    use_case: CreateFlashcardUseCase,
    user_id: str,
    front: str,
    back: str,
    difficulty: str = "medium",
) -> ActionResponse[FlashcardSchema]:
    try:
        flashcard = await use_case.create_flashcard(
            user_id=user_id, front=front, back=back, difficulty=difficulty
        )
        return ActionResponse(success=True, data=FlashcardSchema.from_entity(flashcard))
    except Exception as e:
        return failure_response(e, "Failed to create flashcard")


async def list_flashcards(
    use_case: GetUserFlashcardsUseCase, user_id: str
) -> ActionResponse[list[FlashcardSchema]]:
    try:
        flashcards = await use_case.get_user_flashcards(user_id)
        return ActionResponse(
            success=True, data=[FlashcardSchema.from_entity(f) for f in flashcards]
        )
    except Exception as e:
        return failure_response(e, "Failed to list flashcards")


async def update_flashcard(
    use_case: UpdateFlashcardUseCase,
    flashcard_id: str,
    user_id: str,
    front: str | None = None,
    back: str | None = None,
    difficulty: str | None = None,
) -> ActionResponse[FlashcardSchema]:
    """Edit either side and/or the difficulty of a flashcard the user owns."""
    try:
        flashcard = await use_case.update_flashcard(
            flashcard_id=flashcard_id,
            user_id=user_id,
            front=front,
            back=back,
            difficulty=difficulty,
        )
        return ActionResponse(success=True, data=FlashcardSchema.from_entity(flashcard))
    except Exception as e:
        return failure_response(e, "Failed to update flashcard")


async def delete_flashcard(
    use_case: DeleteFlashcardUseCase, flashcard_id: str, user_id: str
) -> ActionResponse[None]:
    try:
        await use_case.delete_flashcard(flashcard_id=flashcard_id, user_id=user_id)
        return ActionResponse(success=True, message="Flashcard deleted successfully")
    except Exception as e:
        return failure_response(e, "Failed to delete flashcard")
