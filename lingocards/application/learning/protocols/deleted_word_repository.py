"""Protocol for the per-partition record of deleted, already reviewed vocabulary."""

from typing import Protocol

from lingocards.domain.common.value_objects import Partition
from lingocards.domain.learning.value_objects import DeletedWord


class DeletedWordRepositoryProtocol(Protocol):
    """Protocol for deleted word record operations."""

    def find_all(self, partition: Partition) -> list[DeletedWord]:
        """Get the deleted words of a partition, oldest first."""
        ...

    def save_all(self, partition: Partition, words: list[DeletedWord]) -> bool:
        """Replace the deleted word record of a partition."""
        ...

    def clear(self, partition: Partition) -> bool:
        """Drop the deleted word record of a partition."""
        ...
