"""Settings repositories."""

from lingocards.infrastructure.settings.repositories.settings_repository import (
    SettingsRepository,
)

__all__ = ["SettingsRepository"]
