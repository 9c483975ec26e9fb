"""
Learning bounded context - Domain layer.

This context handles flashcard-based learning features:
- Flashcard creation and management
- AI-powered flashcard generation

Aggregates:
- Flashcard: The main aggregate root for study cards
"""

from flashdeck.domain.learning.entities.flashcard import Difficulty, Flashcard
from flashdeck.domain.learning.exceptions import FlashcardNotFoundError

__all__ = [
    "Difficulty",
    "Flashcard",
    "FlashcardNotFoundError",
]
