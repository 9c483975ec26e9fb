"""Pydantic schemas for flashcard data crossing the action boundary."""

from datetime import datetime

from pydantic import BaseModel

from flashdeck.domain.learning.entities.flashcard import Difficulty, Flashcard


class FlashcardSchema(BaseModel):
    id: str
    user_id: str
    front: str
    back: str
    difficulty: Difficulty
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, flashcard: Flashcard) -> "FlashcardSchema":
        return cls(
            id=flashcard.id.value,
            user_id=flashcard.user_id.value,
            front=flashcard.front,
            back=flashcard.back,
            difficulty=flashcard.difficulty,
            created_at=flashcard.created_at,
            updated_at=flashcard.updated_at,
        )
