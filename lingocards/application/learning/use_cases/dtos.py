"""DTOs returned by learning use cases."""

from dataclasses import dataclass

from lingocards.domain.common.value_objects import DeckId, FlashcardId
from lingocards.domain.learning.entities.deck import Deck
from lingocards.domain.learning.entities.flashcard import Flashcard


@dataclass
class SaveCardsResult:
    """Outcome of a bulk save. Skipped cards had an id already in the partition."""

    saved: int = 0
    skipped: int = 0
    invalid: int = 0

    @property
    def total(self) -> int:
        return self.saved + self.skipped + self.invalid


@dataclass
class DeckSummary:
    """Deck with its card and due counts."""

    deck: Deck
    card_count: int
    due_count: int


@dataclass
class CardCandidate:
    """A card drafted by the generator, not yet attached to a deck."""

    native_word: str
    target_word: str
    native_example: str | None = None
    target_example: str | None = None
    id: str | None = None

    def to_flashcard(self, deck_id: DeckId) -> Flashcard:
        """
        Build a flashcard for a deck.

        Raises:
            ValidationError: If a word is empty
        """
        return Flashcard.create(
            deck_id=deck_id,
            native_word=self.native_word,
            target_word=self.target_word,
            native_example=self.native_example,
            target_example=self.target_example,
            id=FlashcardId(self.id) if self.id else None,
        )
