"""Protocol for Deck repository in learning context."""

from typing import Protocol

from lingocards.domain.common.value_objects import DeckId, Partition
from lingocards.domain.learning.entities.deck import Deck


class DeckRepositoryProtocol(Protocol):
    """Protocol for Deck repository operations in learning context."""

    def find_all(self, partition: Partition) -> list[Deck]:
        """
        Get every deck of a partition.

        Args:
            partition: The language pair

        Returns:
            List of deck entities in insertion order
        """
        ...

    def find_by_id(self, deck_id: DeckId, partition: Partition) -> Deck | None:
        """
        Find a deck by ID within a partition.

        Returns:
            Deck entity if found, None otherwise
        """
        ...

    def save_all(self, partition: Partition, decks: list[Deck]) -> bool:
        """
        Replace the stored deck list of a partition.

        Returns:
            True if the write was accepted by the store
        """
        ...

    def partitions(self) -> list[Partition]:
        """List every partition that has a stored deck list."""
        ...
