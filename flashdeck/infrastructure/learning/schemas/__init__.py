from .flashcard_schemas import FlashcardSchema

__all__ = ["FlashcardSchema"]
