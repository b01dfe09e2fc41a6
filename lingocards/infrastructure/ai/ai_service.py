import structlog

from lingocards.application.learning.use_cases.dtos import CardCandidate
from lingocards.application.settings.use_cases.settings_use_case import SettingsUseCase
from lingocards.domain.common.value_objects import Partition
from lingocards.infrastructure.ai.ai_agents import (
    build_generation_prompt,
    get_vocabulary_card_agent,
)

logger = structlog.get_logger(__name__)


class AICardGenerator:
    """Card generator backed by the configured LLM provider."""

    def __init__(self, settings_use_case: SettingsUseCase) -> None:
        self.settings_use_case = settings_use_case

    async def generate_candidate_cards(
        self, partition: Partition, prompt: str, avoid_words: list[str]
    ) -> list[CardCandidate]:
        agent = get_vocabulary_card_agent(self.settings_use_case.get_api_key() or None)
        result = await agent.run(build_generation_prompt(partition, prompt, avoid_words))
        logger.debug("vocabulary_cards_suggested", count=len(result.output))
        return [
            CardCandidate(
                native_word=s.native_word,
                target_word=s.target_word,
                native_example=s.native_example,
                target_example=s.target_example,
            )
            for s in result.output
        ]
