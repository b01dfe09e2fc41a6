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

    # Storage
    DATABASE_URL: str = "sqlite:///lingocards.db"
    STORAGE_BACKEND: Literal["sqlalchemy", "memory"] = "sqlalchemy"

    PROJECT_NAME: str = "lingocards"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

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
        """Whether card generation is enabled."""
        return self.AI_PROVIDER is not None

    @model_validator(mode="after")
    def validate_ai_provider_config(self) -> "Settings":
        """
        Validate AI provider configuration.

        Hosted providers may run without an API key in the environment,
        since a key saved in the app settings takes precedence at call time.
        """
        if self.AI_PROVIDER is not None and self.AI_MODEL_NAME is None:
            msg = f"AI_MODEL_NAME is required when AI_PROVIDER is '{self.AI_PROVIDER}'"
            raise ValueError(msg)

        if self.AI_PROVIDER == "ollama" and not self.OPENAI_BASE_URL:
            msg = "OPENAI_BASE_URL is required when AI_PROVIDER is 'ollama'"
            raise ValueError(msg)
        return self

    def provider_api_key(self) -> str | None:
        """API key configured in the environment for the selected provider."""
        match self.AI_PROVIDER:
            case "openai":
                return self.OPENAI_API_KEY
            case "anthropic":
                return self.ANTHROPIC_API_KEY
            case "google":
                return self.GEMINI_API_KEY
            case _:
                return None


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    # Determine if we should use JSON output (production) or console output (dev)
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
