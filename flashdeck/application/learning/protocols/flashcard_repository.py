"""Protocol for Flashcard repository in learning context."""

from typing import Protocol

from flashdeck.domain.common.value_objects.ids import FlashcardId, UserId
from flashdeck.domain.learning.entities.flashcard import Flashcard


class FlashcardRepositoryProtocol(Protocol):
    """Protocol for Flashcard repository operations in learning context."""

    async def find_by_id(self, flashcard_id: FlashcardId) -> Flashcard | None:
        """
        Find a flashcard by ID.

        Returns:
            Flashcard entity if found, None otherwise
        """
        ...

    async def find_by_user(self, user_id: UserId) -> list[Flashcard]:
        """
        Get all flashcards owned by a user.

        Returns:
            List of flashcard entities in storage order
        """
        ...

    async def find_all(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[Flashcard]: ...

    async def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Save a flashcard entity (create or update).

        Returns:
            Saved flashcard entity with storage-assigned values
        """
        ...

    async def delete(self, flashcard_id: FlashcardId) -> bool:
        """
        Delete a flashcard.

        Returns:
            True if deleted, False if not found
        """
        ...

    async def count(self) -> int: ...
