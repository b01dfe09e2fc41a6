"""Tests for application settings."""

from collections.abc import Iterator

import pytest
import structlog
from pydantic import ValidationError
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer

from lingocards.config import Settings, configure_logging


class TestSettings:
    def test_ai_disabled_by_default(self) -> None:
        settings = Settings(_env_file=None, AI_PROVIDER=None)

        assert settings.ai_enabled is False
        assert settings.provider_api_key() is None

    def test_provider_requires_model_name(self) -> None:
        with pytest.raises(ValidationError, match="AI_MODEL_NAME is required"):
            Settings(_env_file=None, AI_PROVIDER="openai", AI_MODEL_NAME=None)

    def test_ollama_requires_base_url(self) -> None:
        with pytest.raises(ValidationError, match="OPENAI_BASE_URL is required"):
            Settings(
                _env_file=None, AI_PROVIDER="ollama", AI_MODEL_NAME="llama3", OPENAI_BASE_URL=None
            )

    def test_hosted_provider_may_omit_key(self) -> None:
        settings = Settings(
            _env_file=None,
            AI_PROVIDER="anthropic",
            AI_MODEL_NAME="claude-sonnet",
            ANTHROPIC_API_KEY=None,
        )

        assert settings.ai_enabled is True
        assert settings.provider_api_key() is None

    @pytest.mark.parametrize(
        ("provider", "field"),
        [
            ("openai", "OPENAI_API_KEY"),
            ("anthropic", "ANTHROPIC_API_KEY"),
            ("google", "GEMINI_API_KEY"),
        ],
    )
    def test_provider_api_key_follows_provider(self, provider: str, field: str) -> None:
        settings = Settings(
            _env_file=None, AI_PROVIDER=provider, AI_MODEL_NAME="model", **{field: "secret"}
        )

        assert settings.provider_api_key() == "secret"


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def _reset_structlog(self) -> Iterator[None]:
        yield
        structlog.reset_defaults()

    def test_production_renders_json(self) -> None:
        configure_logging("production")

        assert isinstance(structlog.get_config()["processors"][-1], JSONRenderer)

    def test_development_renders_console(self) -> None:
        configure_logging("development")

        assert isinstance(structlog.get_config()["processors"][-1], ConsoleRenderer)
