from .flashcard_repository import FlashcardRepository

__all__ = ["FlashcardRepository"]
