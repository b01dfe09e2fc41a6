from pydantic import BaseModel
from pydantic_ai import Agent

from lingocards.domain.common.value_objects import Partition
from lingocards.infrastructure.ai.ai_model import get_ai_model


class VocabularyCardSuggestion(BaseModel):
    native_word: str
    target_word: str
    native_example: str | None = None
    target_example: str | None = None


def get_vocabulary_card_agent(
    api_key: str | None = None,
) -> Agent[None, list[VocabularyCardSuggestion]]:
    return Agent(
        get_ai_model(api_key),
        output_type=list[VocabularyCardSuggestion],
        instructions="""
        You are a language learning assistant that creates vocabulary flashcards.
        Each card holds one word or short phrase in the learner's native language,
        its translation in the language being learned, and one short example sentence
        for each side. Keep example sentences natural and at the level the request implies.
        Never repeat a word the user lists as already known.
        """,
    )


def build_generation_prompt(partition: Partition, prompt: str, avoid_words: list[str]) -> str:
    """Compose the user message sent to the vocabulary agent."""
    if partition.is_definition_mode:
        lines = [
            f"Generate {partition.target_language} vocabulary cards for a learner who studies "
            f"{partition.target_language} in {partition.target_language} only.",
            "Put the word in native_word and a short definition of it, written in the same "
            "language, in target_word.",
        ]
    else:
        lines = [
            f"Generate flashcards from {partition.native_language} "
            f"to {partition.target_language}.",
            f"native_word and native_example are in {partition.native_language}; "
            f"target_word and target_example are in {partition.target_language}.",
        ]

    if avoid_words:
        lines.append(
            "IMPORTANT: DO NOT include these words that the user already knows: "
            + ", ".join(avoid_words)
        )

    lines.append(f"Request: {prompt}")
    return "\n".join(lines)
