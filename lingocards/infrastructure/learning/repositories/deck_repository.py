"""Repository for Deck domain entities."""

from lingocards.application.ports.partition_store import Namespace, StorageKey
from lingocards.domain.common.value_objects import DeckId, Partition
from lingocards.domain.learning.entities.deck import Deck
from lingocards.infrastructure.learning.mappers import DeckMapper
from lingocards.infrastructure.learning.schemas import DeckRecord
from lingocards.infrastructure.storage.records import dump_list, load_list, unreadable_entries
from lingocards.infrastructure.storage.unit_of_work import StoreUnitOfWork


class DeckRepository:
    """Repository for Deck domain entities, one stored list per partition."""

    def __init__(self, store: StoreUnitOfWork) -> None:
        self.store = store
        self.mapper = DeckMapper()

    def find_all(self, partition: Partition) -> list[Deck]:
        """
        Get every deck of a partition.

        Args:
            partition: The language pair

        Returns:
            List of deck entities in insertion order; corrupt records are skipped
        """
        key = StorageKey.scoped(Namespace.DECKS, partition)
        return load_list(self.store.read(key), DeckRecord, self.mapper.to_domain, key)

    def find_by_id(self, deck_id: DeckId, partition: Partition) -> Deck | None:
        return next((deck for deck in self.find_all(partition) if deck.id == deck_id), None)

    def save_all(self, partition: Partition, decks: list[Deck]) -> bool:
        """
        Replace the stored deck list of a partition.

        Stored entries that no longer parse are kept after the decks.

        Raises:
            StorageUnavailableError: If the current list cannot be read
        """
        key = StorageKey.scoped(Namespace.DECKS, partition)
        records = dump_list(self.mapper.to_record(deck) for deck in decks)
        records.extend(
            unreadable_entries(
                self.store.read_for_update(key), DeckRecord, self.mapper.to_domain, key
            )
        )
        # An empty list removes the key so the partition stops being listed
        return self.store.write(key, records or None)

    def partitions(self) -> list[Partition]:
        return [
            key.partition
            for key in self.store.keys(Namespace.DECKS)
            if key.partition is not None
        ]
