"""Use case for language pair enumeration and recent pairs."""

import structlog

from lingocards.application.common.unit_of_work import UnitOfWork
from lingocards.application.history.protocols.history_repository import (
    HistoryRepositoryProtocol,
)
from lingocards.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from lingocards.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from lingocards.constants import LANGUAGE_PAIR_HISTORY_LIMIT
from lingocards.domain.common.exceptions import StorageUnavailableError
from lingocards.domain.common.value_objects import Partition

logger = structlog.get_logger(__name__)


class LanguagePairUseCase:
    """Lists the partitions in use and remembers recently selected ones."""

    def __init__(
        self,
        history_repository: HistoryRepositoryProtocol,
        deck_repository: DeckRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.history_repository = history_repository
        self.deck_repository = deck_repository
        self.flashcard_repository = flashcard_repository
        self.unit_of_work = unit_of_work

    def record_language_pair(self, partition: Partition) -> None:
        """Move a partition to the front of the recent list."""
        try:
            with self.unit_of_work:
                pairs = [
                    pair
                    for pair in self.history_repository.find_language_pairs()
                    if pair != partition
                ]
                pairs.insert(0, partition)
                self.history_repository.save_language_pairs(pairs[:LANGUAGE_PAIR_HISTORY_LIMIT])
                committed = self.unit_of_work.commit()
        except StorageUnavailableError as e:
            logger.error(
                "record_language_pair_aborted", partition=str(partition), reason=e.reason
            )
            return
        if not committed:
            return
        logger.debug("recorded_language_pair", partition=str(partition))

    def recent_language_pairs(self) -> list[Partition]:
        return self.history_repository.find_language_pairs()

    def list_partitions(self) -> list[Partition]:
        """Every partition holding decks or cards, sorted by target then native language."""
        partitions = set(self.deck_repository.partitions())
        partitions.update(self.flashcard_repository.partitions())
        return sorted(partitions, key=lambda p: (p.target_language, p.native_language))

    def target_languages(self) -> list[str]:
        return list(dict.fromkeys(p.target_language for p in self.list_partitions()))

    def native_languages_for_target(self, target_language: str) -> list[str]:
        return [
            p.native_language
            for p in self.list_partitions()
            if p.target_language == target_language
        ]
