"""Use case for flashcard operations."""

from collections.abc import Iterable, Sequence

import structlog

from lingocards.application.common.unit_of_work import UnitOfWork
from lingocards.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from lingocards.application.learning.protocols.deleted_word_repository import (
    DeletedWordRepositoryProtocol,
)
from lingocards.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from lingocards.application.learning.use_cases.dtos import SaveCardsResult
from lingocards.constants import UNASSIGNED_DECK_KEY
from lingocards.domain.common.clock import Clock, now_millis
from lingocards.domain.common.exceptions import StorageUnavailableError, ValidationError
from lingocards.domain.common.value_objects import DeckId, FlashcardId, Partition
from lingocards.domain.learning.entities.flashcard import Flashcard
from lingocards.domain.learning.value_objects import DeletedWord

logger = structlog.get_logger(__name__)


class FlashcardUseCase:
    """Use case for flashcard CRUD operations within a language pair."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        deck_repository: DeckRepositoryProtocol,
        deleted_word_repository: DeletedWordRepositoryProtocol,
        unit_of_work: UnitOfWork,
        clock: Clock = now_millis,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository
        self.deck_repository = deck_repository
        self.deleted_word_repository = deleted_word_repository
        self.unit_of_work = unit_of_work
        self.clock = clock

    def require_deck(self, deck_id: DeckId, partition: Partition) -> None:
        """Raise ValidationError unless the deck exists in the partition."""
        if self.deck_repository.find_by_id(deck_id, partition) is None:
            raise ValidationError(
                f"Deck {deck_id} does not exist in {partition}",
                field="deck_id",
                value=deck_id.value,
            )

    def add_card(self, card: Flashcard, partition: Partition) -> bool:
        """
        Append a single card to the partition.

        Args:
            card: The card to store
            partition: The language pair

        Returns:
            True if saved, False if a card with the same id already exists or
            the store could not persist it

        Raises:
            ValidationError: If the card's deck does not exist in the partition
        """
        try:
            with self.unit_of_work:
                self.require_deck(card.deck_id, partition)

                cards = self.flashcard_repository.find_all(partition)
                if any(existing.id == card.id for existing in cards):
                    logger.warning(
                        "duplicate_flashcard_skipped",
                        flashcard_id=card.id.value,
                        partition=str(partition),
                    )
                    return False

                cards.append(card)
                self.flashcard_repository.save_all(partition, cards)
                committed = self.unit_of_work.commit()
        except StorageUnavailableError as e:
            logger.error(
                "add_flashcard_aborted",
                flashcard_id=card.id.value,
                partition=str(partition),
                reason=e.reason,
            )
            return False
        if not committed:
            return False

        logger.info(
            "created_flashcard",
            flashcard_id=card.id.value,
            deck_id=card.deck_id.value,
            partition=str(partition),
        )
        return True

    def save_cards(
        self, cards: Sequence[Flashcard], partition: Partition, deck_id: str
    ) -> SaveCardsResult:
        """
        Bulk-save cards into one deck, typically after a generation run.

        Every card is stamped with the deck. Cards whose id is already stored,
        or repeated within the batch, are skipped and counted. Nothing is
        counted as saved when the store could not persist the batch.

        Raises:
            ValidationError: If the deck does not exist in the partition
        """
        deck_id_vo = DeckId(deck_id)
        result = SaveCardsResult()

        try:
            with self.unit_of_work:
                self.require_deck(deck_id_vo, partition)

                stored = self.flashcard_repository.find_all(partition)
                seen_ids = {card.id for card in stored}

                for card in cards:
                    if card.id in seen_ids:
                        result.skipped += 1
                        logger.warning(
                            "duplicate_flashcard_skipped",
                            flashcard_id=card.id.value,
                            partition=str(partition),
                        )
                        continue
                    stored.append(card.in_deck(deck_id_vo))
                    seen_ids.add(card.id)
                    result.saved += 1

                if result.saved:
                    self.flashcard_repository.save_all(partition, stored)
                committed = self.unit_of_work.commit()
        except StorageUnavailableError as e:
            logger.error(
                "save_flashcards_aborted",
                deck_id=deck_id,
                partition=str(partition),
                reason=e.reason,
            )
            return SaveCardsResult()
        if not committed:
            return SaveCardsResult()

        logger.info(
            "saved_flashcards",
            deck_id=deck_id,
            partition=str(partition),
            saved=result.saved,
            skipped=result.skipped,
        )
        return result

    def update_card(self, card: Flashcard, partition: Partition) -> Flashcard | None:
        """
        Replace the stored card with the same id.

        Used both for edits and for persisting scheduler results.

        Returns:
            The stored card, or None if no card with that id exists or the
            store could not persist it

        Raises:
            ValidationError: If the card is moved to a deck that does not exist
        """
        try:
            with self.unit_of_work:
                cards = self.flashcard_repository.find_all(partition)
                for index, stored in enumerate(cards):
                    if stored.id == card.id:
                        break
                else:
                    logger.warning(
                        "flashcard_not_found", flashcard_id=card.id.value, partition=str(partition)
                    )
                    return None

                if card.deck_id != stored.deck_id:
                    self.require_deck(card.deck_id, partition)

                cards[index] = card
                self.flashcard_repository.save_all(partition, cards)
                committed = self.unit_of_work.commit()
        except StorageUnavailableError as e:
            logger.error(
                "update_flashcard_aborted",
                flashcard_id=card.id.value,
                partition=str(partition),
                reason=e.reason,
            )
            return None
        if not committed:
            return None

        logger.info("updated_flashcard", flashcard_id=card.id.value, partition=str(partition))
        return card

    def delete_cards(self, ids: Iterable[str], partition: Partition) -> int:
        """
        Delete cards, remembering the vocabulary of those already reviewed.

        Cards that were never rated leave no trace.

        Returns:
            Number of cards removed; 0 when none matched or nothing could be persisted
        """
        ids_to_delete = {FlashcardId(card_id) for card_id in ids}

        try:
            with self.unit_of_work:
                cards = self.flashcard_repository.find_all(partition)
                removed = [card for card in cards if card.id in ids_to_delete]
                if not removed:
                    logger.warning(
                        "flashcards_not_found",
                        flashcard_ids=sorted(i.value for i in ids_to_delete),
                        partition=str(partition),
                    )
                    return 0

                remaining = [card for card in cards if card.id not in ids_to_delete]
                self.flashcard_repository.save_all(partition, remaining)

                reviewed = [
                    DeletedWord(native_word=card.native_word, target_word=card.target_word)
                    for card in removed
                    if card.has_been_reviewed
                ]
                if reviewed:
                    words = self.deleted_word_repository.find_all(partition)
                    words.extend(word for word in reviewed if word not in words)
                    self.deleted_word_repository.save_all(partition, words)

                committed = self.unit_of_work.commit()
        except StorageUnavailableError as e:
            logger.error("delete_flashcards_aborted", partition=str(partition), reason=e.reason)
            return 0
        if not committed:
            return 0

        logger.info(
            "deleted_flashcards",
            partition=str(partition),
            removed=len(removed),
            remembered=len(reviewed),
        )
        return len(removed)

    def clear_cards(self, partition: Partition) -> int:
        """Remove every card of a partition without recording deleted words."""
        try:
            with self.unit_of_work:
                cards = self.flashcard_repository.find_all(partition)
                self.flashcard_repository.save_all(partition, [])
                committed = self.unit_of_work.commit()
        except StorageUnavailableError as e:
            logger.error("clear_flashcards_aborted", partition=str(partition), reason=e.reason)
            return 0
        if not committed:
            return 0

        logger.info("cleared_flashcards", partition=str(partition), removed=len(cards))
        return len(cards)

    def list_cards(self, partition: Partition, deck_id: str | None = None) -> list[Flashcard]:
        """Get the cards of a partition, optionally only those of one deck."""
        cards = self.flashcard_repository.find_all(partition)
        if deck_id is None:
            return cards
        deck_id_vo = DeckId(deck_id)
        return [card for card in cards if card.deck_id == deck_id_vo]

    def get_card(self, card_id: str, partition: Partition) -> Flashcard | None:
        return self.flashcard_repository.find_by_id(FlashcardId(card_id), partition)

    def due_cards(
        self, partition: Partition, deck_id: str | None = None, now: int | None = None
    ) -> list[Flashcard]:
        """
        Get the cards that are due for review.

        Cards that were never rated are always due.
        """
        now = self.clock() if now is None else now
        return [card for card in self.list_cards(partition, deck_id) if card.is_due(now)]

    def move_cards(self, ids: Iterable[str], target_deck_id: str, partition: Partition) -> int:
        """
        Reassign cards to another deck.

        Returns:
            Number of cards moved; 0 when nothing could be persisted

        Raises:
            ValidationError: If the target deck does not exist in the partition
        """
        target = DeckId(target_deck_id)
        ids_to_move = {FlashcardId(card_id) for card_id in ids}

        try:
            with self.unit_of_work:
                self.require_deck(target, partition)

                cards = self.flashcard_repository.find_all(partition)
                moved = 0
                for index, card in enumerate(cards):
                    if card.id in ids_to_move:
                        cards[index] = card.in_deck(target)
                        moved += 1

                if moved:
                    self.flashcard_repository.save_all(partition, cards)
                committed = self.unit_of_work.commit()
        except StorageUnavailableError as e:
            logger.error("move_flashcards_aborted", partition=str(partition), reason=e.reason)
            return 0
        if not committed:
            return 0

        if moved < len(ids_to_move):
            logger.warning(
                "flashcards_not_found",
                partition=str(partition),
                missing=len(ids_to_move) - moved,
            )

        logger.info(
            "moved_flashcards", target_deck_id=target_deck_id, partition=str(partition), moved=moved
        )
        return moved

    def count_by_deck(self, partition: Partition) -> dict[str, int]:
        """
        Count cards per deck id.

        Cards whose deck no longer exists are counted under "unassigned".
        """
        counts = {deck.id.value: 0 for deck in self.deck_repository.find_all(partition)}
        for card in self.flashcard_repository.find_all(partition):
            key = card.deck_id.value if card.deck_id.value in counts else UNASSIGNED_DECK_KEY
            counts[key] = counts.get(key, 0) + 1
        return counts
