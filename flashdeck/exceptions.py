"""Exception hierarchy for infrastructure failures.

Domain rule violations live in ``flashdeck.domain.common.exceptions``; the
errors here describe storage and external service failures.
"""


class FlashdeckError(Exception):
    """Base exception for all flashdeck infrastructure errors."""

    def __init__(self, message: str) -> None:
        """Initialize exception with message."""
        self.message = message
        super().__init__(self.message)


class PersistenceError(FlashdeckError):
    """A storage backend failed or rejected an operation."""

    def __init__(self, message: str, collection: str | None = None) -> None:
        """Initialize with message and the affected collection."""
        self.collection = collection
        super().__init__(message)


class UnknownFieldError(PersistenceError):
    """A field set contained names outside the collection's allow-list."""

    def __init__(self, collection: str, fields: list[str]) -> None:
        """Initialize with the offending field names."""
        self.fields = sorted(fields)
        super().__init__(
            f"Unknown fields for {collection}: {', '.join(self.fields)}", collection=collection
        )


class ConstraintViolationError(PersistenceError):
    """The backend rejected a write because of a constraint (e.g. duplicate key)."""


class DatabaseNotInitializedError(PersistenceError):
    """A database handle was used before open() or after close()."""

    def __init__(self, backend: str) -> None:
        """Initialize with the backend name."""
        super().__init__(f"{backend} database not initialized. Call open() first.")


class AIServiceError(FlashdeckError):
    """The generative AI provider failed to produce usable output."""


class AIDisabledError(FlashdeckError):
    """AI features were requested but no AI provider is configured."""

    def __init__(self) -> None:
        """Initialize with a fixed message."""
        super().__init__("AI features are not enabled")
