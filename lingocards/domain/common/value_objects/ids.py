from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class DeckId(EntityId):
    """Strongly-typed deck identifier."""

    value: str


@dataclass(frozen=True)
class FlashcardId(EntityId):
    """Strongly-typed flashcard identifier."""

    value: str
