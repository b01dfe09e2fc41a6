"""Mappers for Flashcard and DeletedWord record ↔ Domain conversion."""

from lingocards.domain.common.value_objects import DeckId, FlashcardId
from lingocards.domain.learning.entities.flashcard import Flashcard
from lingocards.domain.learning.value_objects import DeletedWord
from lingocards.infrastructure.learning.schemas import DeletedWordRecord, FlashcardRecord


class FlashcardMapper:
    """Mapper for Flashcard record ↔ Domain conversion."""

    def to_domain(self, record: FlashcardRecord) -> Flashcard:
        """Convert stored record to domain entity."""
        return Flashcard.create_with_id(
            id=FlashcardId(record.id),
            deck_id=DeckId(record.deck_id),
            native_word=record.native_word,
            target_word=record.target_word,
            native_example=record.native_example,
            target_example=record.target_example,
            last_reviewed=record.last_reviewed,
            next_review=record.next_review,
            repetition_level=record.repetition_level,
        )

    def to_record(self, flashcard: Flashcard) -> FlashcardRecord:
        """Convert domain entity to stored record."""
        return FlashcardRecord(
            id=flashcard.id.value,
            deck_id=flashcard.deck_id.value,
            native_word=flashcard.native_word,
            target_word=flashcard.target_word,
            native_example=flashcard.native_example,
            target_example=flashcard.target_example,
            last_reviewed=flashcard.last_reviewed,
            next_review=flashcard.next_review,
            repetition_level=flashcard.repetition_level,
        )


class DeletedWordMapper:
    def to_domain(self, record: DeletedWordRecord) -> DeletedWord:
        return DeletedWord(native_word=record.native_word, target_word=record.target_word)

    def to_record(self, word: DeletedWord) -> DeletedWordRecord:
        return DeletedWordRecord(native_word=word.native_word, target_word=word.target_word)
