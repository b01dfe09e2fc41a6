"""Pydantic schemas for stored user settings."""

from pydantic import Field

from lingocards.infrastructure.learning.schemas import StoredRecord


class RepetitionConfigRecord(StoredRecord):
    """Schema for the stored review intervals."""

    again: float = Field(..., gt=0, description="Minutes until an 'again' card is due")
    hard: float = Field(..., gt=0, description="Hours until a 'hard' card is due")
    good: float = Field(..., gt=0, description="Days until a 'good' card is due")
    easy: float = Field(..., gt=0, description="Days until an 'easy' card is due")
