"""Repository for Flashcard domain entities."""

from lingocards.application.ports.partition_store import Namespace, StorageKey
from lingocards.domain.common.value_objects import FlashcardId, Partition
from lingocards.domain.learning.entities.flashcard import Flashcard
from lingocards.infrastructure.learning.mappers import FlashcardMapper
from lingocards.infrastructure.learning.schemas import FlashcardRecord
from lingocards.infrastructure.storage.records import dump_list, load_list, unreadable_entries
from lingocards.infrastructure.storage.unit_of_work import StoreUnitOfWork


class FlashcardRepository:
    """Repository for Flashcard domain entities, one stored list per partition."""

    def __init__(self, store: StoreUnitOfWork) -> None:
        self.store = store
        self.mapper = FlashcardMapper()

    def find_all(self, partition: Partition) -> list[Flashcard]:
        """
        Get every flashcard of a partition.

        Args:
            partition: The language pair

        Returns:
            List of flashcard entities in insertion order; corrupt records are skipped
        """
        key = StorageKey.scoped(Namespace.FLASHCARDS, partition)
        return load_list(self.store.read(key), FlashcardRecord, self.mapper.to_domain, key)

    def find_by_id(self, flashcard_id: FlashcardId, partition: Partition) -> Flashcard | None:
        """
        Find a flashcard by ID within a partition.

        Args:
            flashcard_id: The flashcard ID
            partition: The language pair

        Returns:
            Flashcard entity if found, None otherwise
        """
        return next(
            (card for card in self.find_all(partition) if card.id == flashcard_id), None
        )

    def save_all(self, partition: Partition, flashcards: list[Flashcard]) -> bool:
        """
        Replace the stored card list of a partition.

        An empty list removes the stored key. Stored entries that no longer
        parse are kept after the cards.

        Returns:
            True if the store accepted the write (or staged it in a transaction)

        Raises:
            StorageUnavailableError: If the current list cannot be read
        """
        key = StorageKey.scoped(Namespace.FLASHCARDS, partition)
        records = dump_list(self.mapper.to_record(card) for card in flashcards)
        records.extend(
            unreadable_entries(
                self.store.read_for_update(key), FlashcardRecord, self.mapper.to_domain, key
            )
        )
        return self.store.write(key, records or None)

    def partitions(self) -> list[Partition]:
        return [
            key.partition
            for key in self.store.keys(Namespace.FLASHCARDS)
            if key.partition is not None
        ]
