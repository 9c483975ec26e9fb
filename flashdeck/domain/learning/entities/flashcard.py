"""
Flashcard entity for AI-assisted study cards.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import FlashcardId, UserId


class Difficulty(StrEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: "str | Difficulty") -> "Difficulty":
        """
        Convert raw input to a Difficulty.

        Raises:
            ValidationError: If value is not one of easy, medium, hard
        """
        if isinstance(value, Difficulty):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise ValidationError(
                "Invalid difficulty level", field="difficulty", value=value
            ) from e


def _check_side(text: str, side: str) -> None:
    if not text or not text.strip():
        raise ValidationError(f"Flashcard {side} cannot be empty", field=side, value=text)


@dataclass
class Flashcard(Entity[FlashcardId]):
    """
    Flashcard with a prompt side and an answer side.

    Business Rules:
    - Front and back cannot be empty
    - Difficulty is one of easy, medium, hard
    - The owning user is referenced by id only
    """

    id: FlashcardId
    user_id: UserId
    front: str
    back: str
    difficulty: Difficulty
    created_at: datetime
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        _check_side(self.front, "front")
        _check_side(self.back, "back")
        self.difficulty = Difficulty.parse(self.difficulty)

    def update_content(self, front: str, back: str) -> None:
        """
        Replace both sides of the card.

        Both sides are checked before either is applied.

        Raises:
            ValidationError: If front or back is empty
        """
        _check_side(front, "front")
        _check_side(back, "back")
        self.front = front.strip()
        self.back = back.strip()
        self.updated_at = datetime.now(UTC)

    def update_difficulty(self, difficulty: str | Difficulty) -> None:
        """
        Change the difficulty level.

        Raises:
            ValidationError: If difficulty is invalid
        """
        self.difficulty = Difficulty.parse(difficulty)
        self.updated_at = datetime.now(UTC)

    @classmethod
    def create(
        cls,
        user_id: UserId,
        front: str,
        back: str,
        difficulty: str | Difficulty,
    ) -> "Flashcard":
        """Create a new flashcard (id is a placeholder until persisted)."""
        return cls(
            id=FlashcardId.generate(),
            user_id=user_id,
            front=front.strip() if front else front,
            back=back.strip() if back else back,
            difficulty=Difficulty.parse(difficulty),
            created_at=datetime.now(UTC),
        )

    @classmethod
    def create_with_id(
        cls,
        id: FlashcardId,
        user_id: UserId,
        front: str,
        back: str,
        difficulty: str | Difficulty,
        created_at: datetime,
        updated_at: datetime | None = None,
    ) -> "Flashcard":
        """Reconstitute a flashcard from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            front=front,
            back=back,
            difficulty=Difficulty.parse(difficulty),
            created_at=created_at,
            updated_at=updated_at,
        )
