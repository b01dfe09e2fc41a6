"""Protocol for the external service that drafts vocabulary cards."""

from typing import Protocol

from lingocards.application.learning.use_cases.dtos import CardCandidate
from lingocards.domain.common.value_objects import Partition


class CardGeneratorProtocol(Protocol):
    """Protocol for flashcard generation services."""

    async def generate_candidate_cards(
        self, partition: Partition, prompt: str, avoid_words: list[str]
    ) -> list[CardCandidate]:
        """
        Draft candidate cards for a language pair.

        Args:
            partition: The language pair to generate for
            prompt: The user's description of the wanted vocabulary
            avoid_words: Words the generator should not repeat (advisory only)

        Returns:
            Candidate cards; the generator may fail by raising
        """
        ...
