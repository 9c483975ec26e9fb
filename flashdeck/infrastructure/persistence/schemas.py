"""Record schemas (field allow-lists) for every persisted entity type."""

from flashdeck.application.ports.crud_repository import RecordSchema

USER_SCHEMA = RecordSchema(
    name="users",
    fields=frozenset({"email", "name", "created_at", "updated_at"}),
    timestamp_fields=frozenset({"created_at", "updated_at"}),
    lookup_fields=frozenset({"email"}),
)

FLASHCARD_SCHEMA = RecordSchema(
    name="flashcards",
    fields=frozenset({"user_id", "front", "back", "difficulty", "created_at", "updated_at"}),
    timestamp_fields=frozenset({"created_at", "updated_at"}),
    lookup_fields=frozenset({"user_id"}),
)
