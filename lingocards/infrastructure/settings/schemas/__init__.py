"""Settings record schemas."""

from lingocards.infrastructure.settings.schemas.settings_schemas import RepetitionConfigRecord

__all__ = ["RepetitionConfigRecord"]
