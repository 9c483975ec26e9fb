"""Repository for Flashcard domain entities."""

import structlog

from flashdeck.application.ports.crud_repository import CrudRepository, Record
from flashdeck.domain.common.value_objects.ids import FlashcardId, UserId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.exceptions import FlashcardNotFoundError
from flashdeck.infrastructure.learning.mappers.flashcard_mapper import FlashcardMapper

logger = structlog.get_logger(__name__)


class FlashcardRepository:
    """Repository for Flashcard domain entities."""

    def __init__(self, records: CrudRepository[Record]) -> None:
        self.records = records
        self.mapper = FlashcardMapper()

    async def find_by_id(self, flashcard_id: FlashcardId) -> Flashcard | None:
        record = await self.records.get_by_id(flashcard_id.value)
        return self.mapper.to_domain(record) if record else None

    async def find_by_user(self, user_id: UserId) -> list[Flashcard]:
        """
        Get all flashcards owned by a user.

        Args:
            user_id: The owning user's ID

        Returns:
            List of flashcard entities
        """
        records = await self.records.find_by("user_id", user_id.value)
        logger.debug("found_flashcards", user_id=user_id.value, count=len(records))
        return [self.mapper.to_domain(record) for record in records]

    async def find_all(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[Flashcard]:
        records = await self.records.get_all(limit=limit, offset=offset)
        return [self.mapper.to_domain(record) for record in records]

    async def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Save a flashcard entity (create or update).

        Returns:
            Saved flashcard entity with storage-assigned values
        """
        if flashcard.id.is_unsaved:
            record = await self.records.create(self.mapper.to_record(flashcard))
            logger.info("created_flashcard", flashcard_id=str(record["id"]))
            return self.mapper.to_domain(record)

        updated = await self.records.update(flashcard.id.value, self.mapper.to_record(flashcard))
        if updated is None:
            raise FlashcardNotFoundError(flashcard.id.value)
        return self.mapper.to_domain(updated)

    async def delete(self, flashcard_id: FlashcardId) -> bool:
        return await self.records.delete(flashcard_id.value)

    async def count(self) -> int:
        return await self.records.count()
