from .ai_flashcard_service import AIFlashcardServiceProtocol, AIFlashcardSuggestion
from .flashcard_repository import FlashcardRepositoryProtocol

__all__ = [
    "AIFlashcardServiceProtocol",
    "AIFlashcardSuggestion",
    "FlashcardRepositoryProtocol",
]
