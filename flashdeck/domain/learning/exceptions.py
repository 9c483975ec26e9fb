"""Learning domain exceptions."""

from flashdeck.domain.common.exceptions import EntityNotFoundError


class FlashcardNotFoundError(EntityNotFoundError):
    """Raised when a flashcard cannot be found."""

    def __init__(self, flashcard_id: object) -> None:
        super().__init__("Flashcard", flashcard_id)
