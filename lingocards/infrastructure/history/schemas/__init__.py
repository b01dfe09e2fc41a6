"""History record schemas."""

from lingocards.infrastructure.history.schemas.history_schemas import (
    LanguagePairRecord,
    PromptHistoryRecord,
)

__all__ = ["LanguagePairRecord", "PromptHistoryRecord"]
