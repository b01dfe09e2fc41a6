"""Use case tracking vocabulary the card generator should not repeat."""

import structlog

from lingocards.application.learning.protocols.deleted_word_repository import (
    DeletedWordRepositoryProtocol,
)
from lingocards.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from lingocards.domain.common.value_objects import Partition
from lingocards.domain.learning.value_objects import DeletedWord

logger = structlog.get_logger(__name__)


class AvoidanceUseCase:
    """
    Builds the do-not-repeat hint handed to the card generator.

    The hint is advisory: the generator may still return listed words.
    """

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        deleted_word_repository: DeletedWordRepositoryProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository
        self.deleted_word_repository = deleted_word_repository

    def words_to_avoid(self, partition: Partition) -> list[str]:
        """
        Words already known in a partition.

        Target words of the stored cards and of deleted reviewed cards, or
        native words in definition mode. Duplicates are dropped, first
        occurrence wins.
        """
        definition_mode = partition.is_definition_mode
        words = [
            card.native_word if definition_mode else card.target_word
            for card in self.flashcard_repository.find_all(partition)
        ]
        words.extend(
            deleted.avoidance_word(definition_mode)
            for deleted in self.deleted_word_repository.find_all(partition)
        )
        return list(dict.fromkeys(words))

    def deleted_words(self, partition: Partition) -> list[DeletedWord]:
        return self.deleted_word_repository.find_all(partition)

    def clear_deleted_cards(self, partition: Partition) -> None:
        """Forget deleted vocabulary so it may be generated again."""
        self.deleted_word_repository.clear(partition)
        logger.info("cleared_deleted_words", partition=str(partition))
