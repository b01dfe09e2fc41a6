"""Use case for deck operations."""

import structlog

from lingocards.application.common.unit_of_work import UnitOfWork
from lingocards.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from lingocards.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from lingocards.application.learning.use_cases.dtos import DeckSummary
from lingocards.domain.common.clock import Clock, now_millis
from lingocards.domain.common.exceptions import StorageUnavailableError
from lingocards.domain.common.value_objects import DeckId, Partition
from lingocards.domain.learning.entities.deck import Deck

logger = structlog.get_logger(__name__)


class DeckUseCase:
    """Use case for deck CRUD operations within a language pair."""

    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
        unit_of_work: UnitOfWork,
        clock: Clock = now_millis,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.deck_repository = deck_repository
        self.flashcard_repository = flashcard_repository
        self.unit_of_work = unit_of_work
        self.clock = clock

    def create_deck(self, name: str, description: str | None, partition: Partition) -> Deck | None:
        """
        Create a new deck at the end of the partition's deck list.

        Args:
            name: Deck name
            description: Optional description
            partition: The language pair the deck belongs to

        Returns:
            Created deck domain entity, or None if the store could not persist it

        Raises:
            ValidationError: If name is empty
        """
        deck = Deck.create(name=name, description=description, now=self.clock())

        try:
            with self.unit_of_work:
                decks = self.deck_repository.find_all(partition)
                decks.append(deck)
                self.deck_repository.save_all(partition, decks)
                committed = self.unit_of_work.commit()
        except StorageUnavailableError as e:
            logger.error("create_deck_aborted", partition=str(partition), reason=e.reason)
            return None
        if not committed:
            return None

        logger.info("created_deck", deck_id=deck.id.value, partition=str(partition))
        return deck

    def update_deck(self, deck: Deck, partition: Partition) -> Deck | None:
        """
        Replace the stored deck with the same id.

        The creation time of the stored deck is kept and the update time is refreshed.

        Returns:
            Updated deck, or None if no deck with that id exists or the store
            could not persist it

        Raises:
            ValidationError: If name is empty
        """
        try:
            with self.unit_of_work:
                decks = self.deck_repository.find_all(partition)
                for index, stored in enumerate(decks):
                    if stored.id == deck.id:
                        break
                else:
                    logger.warning(
                        "deck_not_found", deck_id=deck.id.value, partition=str(partition)
                    )
                    return None

                updated = Deck.create_with_id(
                    id=stored.id,
                    name=stored.name,
                    description=stored.description,
                    created_at=stored.created_at,
                    updated_at=stored.updated_at,
                )
                updated.update_details(deck.name, deck.description, now=self.clock())
                decks[index] = updated
                self.deck_repository.save_all(partition, decks)
                committed = self.unit_of_work.commit()
        except StorageUnavailableError as e:
            logger.error(
                "update_deck_aborted",
                deck_id=deck.id.value,
                partition=str(partition),
                reason=e.reason,
            )
            return None
        if not committed:
            return None

        logger.info("updated_deck", deck_id=deck.id.value, partition=str(partition))
        return updated

    def delete_deck(self, deck_id: str, partition: Partition) -> int:
        """
        Delete a deck together with all of its cards in one commit.

        Args:
            deck_id: ID of the deck to delete
            partition: The language pair

        Returns:
            Number of cards removed along with the deck; 0 when the deck does
            not exist or nothing could be persisted
        """
        deck_id_vo = DeckId(deck_id)

        try:
            with self.unit_of_work:
                decks = self.deck_repository.find_all(partition)
                remaining_decks = [deck for deck in decks if deck.id != deck_id_vo]
                if len(remaining_decks) == len(decks):
                    logger.warning("deck_not_found", deck_id=deck_id, partition=str(partition))
                    return 0

                cards = self.flashcard_repository.find_all(partition)
                remaining_cards = [card for card in cards if card.deck_id != deck_id_vo]

                self.deck_repository.save_all(partition, remaining_decks)
                self.flashcard_repository.save_all(partition, remaining_cards)
                committed = self.unit_of_work.commit()
        except StorageUnavailableError as e:
            logger.error(
                "delete_deck_aborted", deck_id=deck_id, partition=str(partition), reason=e.reason
            )
            return 0
        if not committed:
            return 0

        removed = len(cards) - len(remaining_cards)
        logger.info(
            "deleted_deck", deck_id=deck_id, partition=str(partition), removed_cards=removed
        )
        return removed

    def list_decks(self, partition: Partition) -> list[Deck]:
        """Get the decks of a partition in insertion order."""
        return self.deck_repository.find_all(partition)

    def get_deck(self, deck_id: str, partition: Partition) -> Deck | None:
        return self.deck_repository.find_by_id(DeckId(deck_id), partition)

    def has_decks(self, partition: Partition) -> bool:
        """Whether the partition has any deck. Card saving needs at least one."""
        return bool(self.deck_repository.find_all(partition))

    def deck_summaries(self, partition: Partition) -> list[DeckSummary]:
        """Get every deck with its total and currently due card counts."""
        now = self.clock()
        cards = self.flashcard_repository.find_all(partition)
        summaries = []
        for deck in self.deck_repository.find_all(partition):
            deck_cards = [card for card in cards if card.deck_id == deck.id]
            summaries.append(
                DeckSummary(
                    deck=deck,
                    card_count=len(deck_cards),
                    due_count=sum(1 for card in deck_cards if card.is_due(now)),
                )
            )
        return summaries
