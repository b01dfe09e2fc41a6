"""Repository for the global user settings."""

import structlog
from pydantic import ValidationError as PydanticValidationError

from lingocards.application.ports.partition_store import Namespace, StorageKey
from lingocards.domain.learning.value_objects import RepetitionConfig
from lingocards.infrastructure.settings.schemas import RepetitionConfigRecord
from lingocards.infrastructure.storage.unit_of_work import StoreUnitOfWork

logger = structlog.get_logger(__name__)

REPETITION_CONFIG_KEY = StorageKey.global_(Namespace.REPETITION_CONFIG)
API_KEY_KEY = StorageKey.global_(Namespace.API_KEY)


class SettingsRepository:
    """Repository for the repetition config and the saved generator API key."""

    def __init__(self, store: StoreUnitOfWork) -> None:
        self.store = store

    def find_repetition_config(self) -> RepetitionConfig | None:
        """
        Get the stored repetition config.

        Returns:
            The config, or None if it was never saved or the stored value is corrupt
        """
        raw = self.store.read(REPETITION_CONFIG_KEY)
        if raw is None:
            return None
        try:
            record = RepetitionConfigRecord.model_validate(raw)
        except PydanticValidationError as e:
            logger.warning("corrupt_repetition_config_ignored", error=str(e))
            return None
        return RepetitionConfig(
            again=record.again, hard=record.hard, good=record.good, easy=record.easy
        )

    def save_repetition_config(self, config: RepetitionConfig | None) -> bool:
        if config is None:
            return self.store.delete(REPETITION_CONFIG_KEY)
        record = RepetitionConfigRecord(
            again=config.again, hard=config.hard, good=config.good, easy=config.easy
        )
        return self.store.write(REPETITION_CONFIG_KEY, record.model_dump(by_alias=True))

    def find_api_key(self) -> str | None:
        raw = self.store.read(API_KEY_KEY)
        return raw if isinstance(raw, str) and raw else None

    def save_api_key(self, api_key: str | None) -> bool:
        if not api_key:
            return self.store.delete(API_KEY_KEY)
        return self.store.write(API_KEY_KEY, api_key)
