"""
Application startup and shutdown.

Every dependency is built here once, by explicit constructor calls, from a
``Settings`` instance. Nothing below this module reads configuration.

Example:
    async with application_lifespan(get_settings()) as app:
        response = await create_user(app.create_user, email="a@b.co", name="Ada")
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import structlog

from flashdeck.application.identity.use_cases import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from flashdeck.application.learning.protocols.ai_flashcard_service import (
    AIFlashcardServiceProtocol,
)
from flashdeck.application.learning.use_cases import (
    CreateFlashcardUseCase,
    DeleteFlashcardUseCase,
    GenerateFlashcardUseCase,
    GetUserFlashcardsUseCase,
    UpdateFlashcardUseCase,
)
from flashdeck.application.ports.crud_repository import CrudRepository, Record
from flashdeck.config import Settings, configure_logging
from flashdeck.infrastructure.ai import AIService, build_ai_model
from flashdeck.infrastructure.identity.repositories import UserRepository
from flashdeck.infrastructure.learning.repositories import FlashcardRepository
from flashdeck.infrastructure.persistence.document import DocumentCrudRepository, DocumentDatabase
from flashdeck.infrastructure.persistence.schemas import FLASHCARD_SCHEMA, USER_SCHEMA
from flashdeck.infrastructure.persistence.sql import Database, SqlCrudRepository, flashcards, users

logger = structlog.get_logger(__name__)


@dataclass
class Application:
    """Fully wired use cases plus the storage handle that backs them."""

    settings: Settings
    database: Database | DocumentDatabase

    create_user: CreateUserUseCase
    get_user: GetUserUseCase
    list_users: ListUsersUseCase
    update_user: UpdateUserUseCase
    delete_user: DeleteUserUseCase

    create_flashcard: CreateFlashcardUseCase
    generate_flashcard: GenerateFlashcardUseCase
    get_user_flashcards: GetUserFlashcardsUseCase
    update_flashcard: UpdateFlashcardUseCase
    delete_flashcard: DeleteFlashcardUseCase

    async def close(self) -> None:
        """Release the storage backend."""
        await self.database.close()
        logger.info("application_stopped", backend=self.settings.DATABASE_BACKEND)


async def _open_sql(
    settings: Settings,
) -> tuple[Database, CrudRepository[Record], CrudRepository[Record]]:
    database = Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    database.open()
    try:
        await database.create_schema()
    except Exception:
        await database.close()
        raise
    return (
        database,
        SqlCrudRepository(database, users, USER_SCHEMA),
        SqlCrudRepository(database, flashcards, FLASHCARD_SCHEMA),
    )


async def _open_document(
    settings: Settings,
) -> tuple[DocumentDatabase, CrudRepository[Record], CrudRepository[Record]]:
    # MONGODB_URL is guaranteed by the settings validator
    assert settings.MONGODB_URL is not None
    database = DocumentDatabase.connect(
        settings.MONGODB_URL,
        settings.MONGODB_DATABASE,
        server_selection_timeout_ms=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
    )
    try:
        await database.ping()
        user_records = DocumentCrudRepository(database, USER_SCHEMA)
        flashcard_records = DocumentCrudRepository(database, FLASHCARD_SCHEMA)
        await user_records.ensure_indexes()
        await flashcard_records.ensure_indexes()
    except Exception:
        await database.close()
        raise
    return database, user_records, flashcard_records


async def start_application(settings: Settings) -> Application:
    """
    Open the configured backend and wire every use case.

    Args:
        settings: Loaded application settings

    Returns:
        Application whose close() must be awaited at shutdown

    Raises:
        PersistenceError: If the backend cannot be opened
    """
    configure_logging(settings.ENVIRONMENT)

    database: Database | DocumentDatabase
    if settings.DATABASE_BACKEND == "document":
        database, user_records, flashcard_records = await _open_document(settings)
    else:
        database, user_records, flashcard_records = await _open_sql(settings)

    user_repository = UserRepository(user_records)
    flashcard_repository = FlashcardRepository(flashcard_records)

    ai_service: AIFlashcardServiceProtocol | None = None
    if settings.ai_enabled:
        ai_service = AIService(build_ai_model(settings))

    logger.info(
        "application_started",
        backend=settings.DATABASE_BACKEND,
        ai_provider=settings.AI_PROVIDER,
    )

    return Application(
        settings=settings,
        database=database,
        create_user=CreateUserUseCase(user_repository),
        get_user=GetUserUseCase(user_repository),
        list_users=ListUsersUseCase(user_repository),
        update_user=UpdateUserUseCase(user_repository),
        delete_user=DeleteUserUseCase(user_repository),
        create_flashcard=CreateFlashcardUseCase(flashcard_repository, user_repository),
        generate_flashcard=GenerateFlashcardUseCase(
            flashcard_repository, user_repository, ai_service
        ),
        get_user_flashcards=GetUserFlashcardsUseCase(flashcard_repository),
        update_flashcard=UpdateFlashcardUseCase(flashcard_repository),
        delete_flashcard=DeleteFlashcardUseCase(flashcard_repository),
    )


@asynccontextmanager
async def application_lifespan(settings: Settings) -> AsyncIterator[Application]:
    """Start the application and close it when the block exits."""
    app = await start_application(settings)
    try:
        yield app
    finally:
        await app.close()
