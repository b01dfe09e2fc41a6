"""Pydantic schemas for the stored learning records."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from lingocards.constants import UNASSIGNED_DECK_KEY


class StoredRecord(BaseModel):
    """Base schema: camelCase keys on disk, snake_case attributes in Python."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class DeckRecord(StoredRecord):
    """Schema for one deck of a partition's deck list."""

    id: str = Field(..., min_length=1)
    name: str
    description: str | None = None
    created_at: int
    updated_at: int


class FlashcardRecord(StoredRecord):
    """Schema for one card of a partition's card list."""

    id: str = Field(..., min_length=1)
    # Cards stored before decks existed carry no deck id
    deck_id: str = UNASSIGNED_DECK_KEY
    native_word: str
    target_word: str
    native_example: str | None = None
    target_example: str | None = None
    last_reviewed: int | None = None
    next_review: int | None = None
    repetition_level: int = 0


class DeletedWordRecord(StoredRecord):
    """Schema for the vocabulary of a deleted, already reviewed card."""

    native_word: str
    target_word: str
