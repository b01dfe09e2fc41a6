"""Protocol for the global generation history."""

from typing import Protocol

from lingocards.domain.common.value_objects import Partition
from lingocards.domain.history.value_objects import PromptHistoryEntry


class HistoryRepositoryProtocol(Protocol):
    """Protocol for prompt and language pair history operations."""

    def find_prompts(self) -> list[PromptHistoryEntry]:
        """Get the prompt history, newest first."""
        ...

    def save_prompts(self, entries: list[PromptHistoryEntry]) -> bool:
        """Replace the prompt history."""
        ...

    def find_language_pairs(self) -> list[Partition]:
        """Get recently used language pairs, newest first."""
        ...

    def save_language_pairs(self, partitions: list[Partition]) -> bool:
        """Replace the recent language pair list."""
        ...
