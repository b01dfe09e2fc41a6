"""Learning record mappers."""

from lingocards.infrastructure.learning.mappers.deck_mapper import DeckMapper
from lingocards.infrastructure.learning.mappers.flashcard_mapper import (
    DeletedWordMapper,
    FlashcardMapper,
)

__all__ = ["DeckMapper", "DeletedWordMapper", "FlashcardMapper"]
