"""Use case for user settings."""

import structlog

from lingocards.application.settings.protocols.settings_repository import (
    SettingsRepositoryProtocol,
)
from lingocards.domain.learning.value_objects import DEFAULT_REPETITION_CONFIG, RepetitionConfig

logger = structlog.get_logger(__name__)


class SettingsUseCase:
    """Reads and writes the repetition config and the generator API key."""

    def __init__(self, settings_repository: SettingsRepositoryProtocol) -> None:
        self.settings_repository = settings_repository

    def get_repetition_config(self) -> RepetitionConfig:
        """Get the stored repetition config, falling back to the defaults."""
        return self.settings_repository.find_repetition_config() or DEFAULT_REPETITION_CONFIG

    def save_repetition_config(self, config: RepetitionConfig) -> RepetitionConfig:
        self.settings_repository.save_repetition_config(config)
        logger.info("saved_repetition_config", **config.__dict__)
        return config

    def reset_repetition_config(self) -> RepetitionConfig:
        self.settings_repository.save_repetition_config(None)
        logger.info("reset_repetition_config")
        return DEFAULT_REPETITION_CONFIG

    def get_api_key(self) -> str:
        """Get the saved API key, or an empty string. Its contents are not validated."""
        return self.settings_repository.find_api_key() or ""

    def save_api_key(self, api_key: str) -> None:
        """Save the API key. A blank key clears it."""
        api_key = api_key.strip()
        self.settings_repository.save_api_key(api_key or None)
        logger.info("saved_api_key" if api_key else "cleared_api_key")

    def clear_api_key(self) -> None:
        self.settings_repository.save_api_key(None)
        logger.info("cleared_api_key")
