"""Learning record schemas."""

from lingocards.infrastructure.learning.schemas.record_schemas import (
    DeckRecord,
    DeletedWordRecord,
    FlashcardRecord,
    StoredRecord,
)

__all__ = [
    "DeckRecord",
    "DeletedWordRecord",
    "FlashcardRecord",
    "StoredRecord",
]
