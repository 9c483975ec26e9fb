from .create_flashcard_use_case import CreateFlashcardUseCase
from .delete_flashcard_use_case import DeleteFlashcardUseCase
from .generate_flashcard_use_case import GenerateFlashcardUseCase
from .get_user_flashcards_use_case import GetUserFlashcardsUseCase
from .update_flashcard_use_case import UpdateFlashcardUseCase

__all__ = [
    "CreateFlashcardUseCase",
    "DeleteFlashcardUseCase",
    "GenerateFlashcardUseCase",
    "GetUserFlashcardsUseCase",
    "UpdateFlashcardUseCase",
]
