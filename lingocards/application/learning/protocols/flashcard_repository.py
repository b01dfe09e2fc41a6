"""Protocol for Flashcard repository in learning context."""

from typing import Protocol

from lingocards.domain.common.value_objects import FlashcardId, Partition
from lingocards.domain.learning.entities.flashcard import Flashcard


class FlashcardRepositoryProtocol(Protocol):
    """Protocol for Flashcard repository operations in learning context."""

    def find_all(self, partition: Partition) -> list[Flashcard]:
        """
        Get every flashcard of a partition, regardless of deck.

        Returns:
            List of flashcard entities in insertion order
        """
        ...

    def find_by_id(self, flashcard_id: FlashcardId, partition: Partition) -> Flashcard | None:
        """
        Find a flashcard by ID within a partition.

        Returns:
            Flashcard entity if found, None otherwise
        """
        ...

    def save_all(self, partition: Partition, flashcards: list[Flashcard]) -> bool:
        """
        Replace the stored flashcard list of a partition.

        Returns:
            True if the write was accepted by the store
        """
        ...

    def partitions(self) -> list[Partition]:
        """List every partition that has a stored flashcard list."""
        ...
