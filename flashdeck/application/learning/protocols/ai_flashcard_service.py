from dataclasses import dataclass
from typing import Protocol

from flashdeck.domain.learning.entities.flashcard import Difficulty


@dataclass(frozen=True)
class AIFlashcardSuggestion:
    front: str
    back: str


class AIFlashcardServiceProtocol(Protocol):
    async def generate_flashcard(
        self, topic: str, difficulty: Difficulty
    ) -> AIFlashcardSuggestion: ...
