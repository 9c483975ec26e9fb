"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # Storage backend
    DATABASE_BACKEND: Literal["sql", "document"] = "sql"

    # Relational store
    DATABASE_URL: str = "sqlite+aiosqlite:///./data/app.db"
    DATABASE_ECHO: bool = False

    # Document store
    MONGODB_URL: str | None = None
    MONGODB_DATABASE: str = "flashdeck"
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = 5000

    # AI configuration
    AI_PROVIDER: (
        Literal["ollama"] | Literal["openai"] | Literal["anthropic"] | Literal["google"] | None
    ) = None
    AI_MODEL_NAME: str | None = None

    # ollama
    OPENAI_BASE_URL: str | None = None
    # openai
    OPENAI_API_KEY: str | None = None
    # anthropic
    ANTHROPIC_API_KEY: str | None = None
    # google
    GEMINI_API_KEY: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ai_enabled(self) -> bool:
        """Whether AI features are enabled."""
        return self.AI_PROVIDER is not None

    @model_validator(mode="after")
    def validate_database_config(self) -> "Settings":
        """Validate storage backend configuration."""
        if self.DATABASE_BACKEND == "document" and not self.MONGODB_URL:
            msg = "MONGODB_URL is required when DATABASE_BACKEND is 'document'"
            raise ValueError(msg)
        if self.DATABASE_BACKEND == "sql" and not self.DATABASE_URL:
            msg = "DATABASE_URL is required when DATABASE_BACKEND is 'sql'"
            raise ValueError(msg)
        return self

    @model_validator(mode="after")
    def validate_ai_provider_config(self) -> "Settings":
        """Validate AI provider configuration."""
        if self.AI_PROVIDER is not None and self.AI_MODEL_NAME is None:
            msg = "AI_MODEL_NAME is required when AI_PROVIDER is set"
            raise ValueError(msg)

        if self.AI_PROVIDER == "ollama" and not self.OPENAI_BASE_URL:
            msg = "OPENAI_BASE_URL is required when AI_PROVIDER is 'ollama'"
            raise ValueError(msg)
        if self.AI_PROVIDER == "openai" and not self.OPENAI_API_KEY:
            msg = "OPENAI_API_KEY is required when AI_PROVIDER is 'openai'"
            raise ValueError(msg)
        if self.AI_PROVIDER == "anthropic" and not self.ANTHROPIC_API_KEY:
            msg = "ANTHROPIC_API_KEY is required when AI_PROVIDER is 'anthropic'"
            raise ValueError(msg)
        if self.AI_PROVIDER == "google" and not self.GEMINI_API_KEY:
            msg = "GEMINI_API_KEY is required when AI_PROVIDER is 'google'"
            raise ValueError(msg)
        return self


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    # JSON output in production, console output elsewhere
    use_json = environment == "production"

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
