"""
Flashcard entity for spaced repetition learning.
"""

from dataclasses import dataclass, replace

from lingocards.domain.common.entity import Entity
from lingocards.domain.common.exceptions import ValidationError
from lingocards.domain.common.value_objects import DeckId, FlashcardId


@dataclass(eq=False)
class Flashcard(Entity[FlashcardId]):
    """
    Vocabulary flashcard pairing a native word with its target-language counterpart.

    Business Rules:
    - Native and target words cannot be empty
    - A flashcard always references a deck of its own partition
    - Review metadata is absent until the card is first rated
    - Repetition level is never negative
    """

    id: FlashcardId
    deck_id: DeckId
    native_word: str
    target_word: str
    native_example: str | None = None
    target_example: str | None = None

    # Review metadata (epoch ms)
    last_reviewed: int | None = None
    next_review: int | None = None
    repetition_level: int = 0

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.native_word or not self.native_word.strip():
            raise ValidationError("Native word cannot be empty", field="native_word")
        if not self.target_word or not self.target_word.strip():
            raise ValidationError("Target word cannot be empty", field="target_word")
        if self.repetition_level < 0:
            raise ValidationError(
                "Repetition level cannot be negative",
                field="repetition_level",
                value=self.repetition_level,
            )

    @property
    def has_been_reviewed(self) -> bool:
        return self.last_reviewed is not None

    def is_due(self, now: int) -> bool:
        """A card is due when it was never scheduled or its next review has passed."""
        return self.next_review is None or self.next_review <= now

    def update_content(
        self,
        native_word: str | None = None,
        target_word: str | None = None,
        native_example: str | None = None,
        target_example: str | None = None,
    ) -> None:
        """
        Update the card's words and examples. Omitted values are left unchanged.

        Raises:
            ValidationError: If a provided word is empty
        """
        if native_word is not None:
            if not native_word.strip():
                raise ValidationError("Native word cannot be empty", field="native_word")
            self.native_word = native_word.strip()
        if target_word is not None:
            if not target_word.strip():
                raise ValidationError("Target word cannot be empty", field="target_word")
            self.target_word = target_word.strip()
        if native_example is not None:
            self.native_example = native_example.strip() or None
        if target_example is not None:
            self.target_example = target_example.strip() or None

    def in_deck(self, deck_id: DeckId) -> "Flashcard":
        """Return a copy of this card assigned to another deck."""
        return replace(self, deck_id=deck_id)

    def with_review(
        self, last_reviewed: int, next_review: int, repetition_level: int
    ) -> "Flashcard":
        """Return a copy carrying new review metadata."""
        return replace(
            self,
            last_reviewed=last_reviewed,
            next_review=next_review,
            repetition_level=repetition_level,
        )

    @classmethod
    def create(
        cls,
        deck_id: DeckId,
        native_word: str,
        target_word: str,
        native_example: str | None = None,
        target_example: str | None = None,
        id: FlashcardId | None = None,
    ) -> "Flashcard":
        """Create a new, never reviewed flashcard."""
        return cls(
            id=id or FlashcardId.generate(),
            deck_id=deck_id,
            native_word=native_word.strip(),
            target_word=target_word.strip(),
            native_example=(native_example or "").strip() or None,
            target_example=(target_example or "").strip() or None,
        )

    @classmethod
    def create_with_id(
        cls,
        id: FlashcardId,
        deck_id: DeckId,
        native_word: str,
        target_word: str,
        native_example: str | None,
        target_example: str | None,
        last_reviewed: int | None,
        next_review: int | None,
        repetition_level: int,
    ) -> "Flashcard":
        """Reconstitute a flashcard from persistence."""
        return cls(
            id=id,
            deck_id=deck_id,
            native_word=native_word,
            target_word=target_word,
            native_example=native_example,
            target_example=target_example,
            last_reviewed=last_reviewed,
            next_review=next_review,
            repetition_level=repetition_level,
        )
