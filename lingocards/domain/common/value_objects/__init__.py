"""Common value objects shared across all domain modules."""

from .ids import DeckId, FlashcardId
from .partition import Partition

__all__ = [
    "DeckId",
    "FlashcardId",
    "Partition",
]
