"""Pydantic schemas for the stored generation history."""

from pydantic import Field

from lingocards.infrastructure.learning.schemas import StoredRecord


class LanguagePairRecord(StoredRecord):
    """Schema for a recently used language pair."""

    native_language: str = Field(..., min_length=1)
    target_language: str = Field(..., min_length=1)


class PromptHistoryRecord(LanguagePairRecord):
    """Schema for one generation prompt."""

    prompt: str = Field(..., min_length=1)
    timestamp: int
