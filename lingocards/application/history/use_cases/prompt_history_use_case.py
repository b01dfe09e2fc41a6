"""Use case for the generation prompt history."""

import structlog

from lingocards.application.common.unit_of_work import UnitOfWork
from lingocards.application.history.protocols.history_repository import (
    HistoryRepositoryProtocol,
)
from lingocards.constants import (
    DEFAULT_PROMPT_SUGGESTIONS,
    PROMPT_HISTORY_LIMIT,
    RELEVANT_PROMPT_LIMIT,
)
from lingocards.domain.common.clock import Clock, now_millis
from lingocards.domain.common.exceptions import StorageUnavailableError
from lingocards.domain.common.value_objects import Partition
from lingocards.domain.history.value_objects import PromptHistoryEntry

logger = structlog.get_logger(__name__)


class PromptHistoryUseCase:
    """Keeps the most recent generation prompts, newest first."""

    def __init__(
        self,
        history_repository: HistoryRepositoryProtocol,
        unit_of_work: UnitOfWork,
        clock: Clock = now_millis,
    ) -> None:
        self.history_repository = history_repository
        self.unit_of_work = unit_of_work
        self.clock = clock

    def record_prompt(self, prompt: str, partition: Partition) -> PromptHistoryEntry | None:
        """
        Put a prompt at the front of the history.

        An earlier entry with the same prompt and partition is replaced, and
        the history is capped at the most recent entries.

        Returns:
            The recorded entry, or None if the store could not persist it

        Raises:
            ValidationError: If prompt is empty
        """
        entry = PromptHistoryEntry(
            prompt=prompt.strip(), partition=partition, timestamp=self.clock()
        )

        try:
            with self.unit_of_work:
                entries = [
                    existing
                    for existing in self.history_repository.find_prompts()
                    if not existing.matches(entry.prompt, partition)
                ]
                entries.insert(0, entry)
                self.history_repository.save_prompts(entries[:PROMPT_HISTORY_LIMIT])
                committed = self.unit_of_work.commit()
        except StorageUnavailableError as e:
            logger.error("record_prompt_aborted", partition=str(partition), reason=e.reason)
            return None
        if not committed:
            return None

        logger.info("recorded_prompt", partition=str(partition))
        return entry

    def list_prompts(self) -> list[PromptHistoryEntry]:
        return self.history_repository.find_prompts()

    def relevant_prompts(
        self, partition: Partition | None = None, limit: int = RELEVANT_PROMPT_LIMIT
    ) -> list[PromptHistoryEntry]:
        """
        Recent prompts to base new suggestions on.

        Prompts of the given partition are preferred; when it has none the
        whole history is used.
        """
        entries = self.history_repository.find_prompts()
        if partition is not None:
            matching = [entry for entry in entries if entry.partition == partition]
            if matching:
                entries = matching
        return entries[:limit]

    def suggested_prompts(self, partition: Partition | None = None) -> list[str]:
        """Prompts to offer the user, or the built-in suggestions without history."""
        relevant = self.relevant_prompts(partition)
        if not relevant:
            return list(DEFAULT_PROMPT_SUGGESTIONS)
        return [entry.prompt for entry in relevant]

    def clear_history(self) -> None:
        self.history_repository.save_prompts([])
        logger.info("cleared_prompt_history")
