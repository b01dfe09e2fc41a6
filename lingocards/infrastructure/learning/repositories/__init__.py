"""Learning repositories."""

from lingocards.infrastructure.learning.repositories.deck_repository import DeckRepository
from lingocards.infrastructure.learning.repositories.deleted_word_repository import (
    DeletedWordRepository,
)
from lingocards.infrastructure.learning.repositories.flashcard_repository import (
    FlashcardRepository,
)

__all__ = ["DeckRepository", "DeletedWordRepository", "FlashcardRepository"]
