"""History record mappers."""

from lingocards.infrastructure.history.mappers.history_mapper import (
    LanguagePairMapper,
    PromptHistoryMapper,
)

__all__ = ["LanguagePairMapper", "PromptHistoryMapper"]
