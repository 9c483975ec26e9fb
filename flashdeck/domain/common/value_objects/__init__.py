"""Common value objects shared across all domain modules."""

from .ids import FlashcardId, UserId

__all__ = [
    "FlashcardId",
    "UserId",
]
