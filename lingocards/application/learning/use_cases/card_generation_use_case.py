"""Use case for AI-assisted flashcard generation."""

import structlog

from lingocards.application.history.use_cases.language_pair_use_case import LanguagePairUseCase
from lingocards.application.history.use_cases.prompt_history_use_case import (
    PromptHistoryUseCase,
)
from lingocards.application.learning.protocols.card_generator import CardGeneratorProtocol
from lingocards.application.learning.use_cases.avoidance_use_case import AvoidanceUseCase
from lingocards.application.learning.use_cases.dtos import CardCandidate, SaveCardsResult
from lingocards.application.learning.use_cases.flashcard_use_case import FlashcardUseCase
from lingocards.domain.common.exceptions import DomainError, ValidationError
from lingocards.domain.common.value_objects import DeckId, Partition

logger = structlog.get_logger(__name__)


class CardGenerationUseCase:
    """Asks the generator for new cards and files them into a deck."""

    def __init__(
        self,
        card_generator: CardGeneratorProtocol,
        avoidance_use_case: AvoidanceUseCase,
        prompt_history_use_case: PromptHistoryUseCase,
        language_pair_use_case: LanguagePairUseCase,
        flashcard_use_case: FlashcardUseCase,
    ) -> None:
        self.card_generator = card_generator
        self.avoidance_use_case = avoidance_use_case
        self.prompt_history_use_case = prompt_history_use_case
        self.language_pair_use_case = language_pair_use_case
        self.flashcard_use_case = flashcard_use_case

    async def generate(self, partition: Partition, prompt: str) -> list[CardCandidate]:
        """
        Draft candidate cards for a prompt.

        The prompt and language pair are recorded in the history. Generator
        failures are not retried and yield no cards.

        Raises:
            ValidationError: If prompt is empty
        """
        if not prompt or not prompt.strip():
            raise ValidationError("Prompt cannot be empty", field="prompt")
        prompt = prompt.strip()

        avoid_words = self.avoidance_use_case.words_to_avoid(partition)
        self.prompt_history_use_case.record_prompt(prompt, partition)
        self.language_pair_use_case.record_language_pair(partition)

        try:
            candidates = await self.card_generator.generate_candidate_cards(
                partition, prompt, avoid_words
            )
        except Exception:
            logger.exception("card_generation_failed", partition=str(partition))
            return []

        logger.info(
            "card_candidates_generated",
            partition=str(partition),
            candidate_count=len(candidates),
            avoided=len(avoid_words),
        )
        return candidates

    async def generate_and_save(
        self, partition: Partition, prompt: str, deck_id: str
    ) -> SaveCardsResult:
        """
        Generate cards and save them into a deck.

        Candidates with an empty word are counted as invalid and dropped.

        Raises:
            ValidationError: If prompt is empty or the deck does not exist
        """
        deck_id_vo = DeckId(deck_id)
        self.flashcard_use_case.require_deck(deck_id_vo, partition)

        candidates = await self.generate(partition, prompt)

        flashcards = []
        invalid = 0
        for candidate in candidates:
            try:
                flashcards.append(candidate.to_flashcard(deck_id_vo))
            except DomainError as e:
                invalid += 1
                logger.warning("invalid_card_candidate", reason=e.message)

        result = self.flashcard_use_case.save_cards(flashcards, partition, deck_id)
        result.invalid += invalid
        return result
