"""Mapper for Flashcard record ↔ Domain conversion."""

from flashdeck.application.ports.crud_repository import Record
from flashdeck.domain.common.value_objects import FlashcardId, UserId
from flashdeck.domain.learning.entities.flashcard import Flashcard


class FlashcardMapper:
    """Mapper for Flashcard record ↔ Domain conversion."""

    def to_domain(self, record: Record) -> Flashcard:
        """Convert a stored record to a domain entity."""
        return Flashcard.create_with_id(
            id=FlashcardId(str(record["id"])),
            user_id=UserId(str(record["user_id"])),
            front=record["front"],
            back=record["back"],
            difficulty=record["difficulty"],
            created_at=record["created_at"],
            updated_at=record["updated_at"],
        )

    def to_record(self, domain_entity: Flashcard) -> Record:
        """Convert a domain entity to writable record fields (no id)."""
        return {
            "user_id": domain_entity.user_id.value,
            "front": domain_entity.front,
            "back": domain_entity.back,
            "difficulty": domain_entity.difficulty.value,
            "created_at": domain_entity.created_at,
            "updated_at": domain_entity.updated_at,
        }
