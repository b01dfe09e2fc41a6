"""Use case for spaced repetition reviews."""

import structlog

from lingocards.application.learning.services.review_session import ReviewSession
from lingocards.application.learning.use_cases.flashcard_use_case import FlashcardUseCase
from lingocards.application.settings.use_cases.settings_use_case import SettingsUseCase
from lingocards.domain.common.clock import Clock, now_millis
from lingocards.domain.common.value_objects import Partition
from lingocards.domain.learning.entities.flashcard import Flashcard
from lingocards.domain.learning.services.review_scheduler import ReviewScheduler
from lingocards.domain.learning.value_objects import Rating

logger = structlog.get_logger(__name__)


class ReviewUseCase:
    """Pairs the scheduler with card persistence and starts review sessions."""

    def __init__(
        self,
        flashcard_use_case: FlashcardUseCase,
        settings_use_case: SettingsUseCase,
        scheduler: ReviewScheduler,
        clock: Clock = now_millis,
    ) -> None:
        self.flashcard_use_case = flashcard_use_case
        self.settings_use_case = settings_use_case
        self.scheduler = scheduler
        self.clock = clock

    def start_session(self, partition: Partition, deck_id: str | None = None) -> ReviewSession:
        """Snapshot the currently due cards into a new session."""
        due = self.flashcard_use_case.due_cards(partition, deck_id, now=self.clock())
        logger.info(
            "review_session_started", partition=str(partition), deck_id=deck_id, due=len(due)
        )
        return ReviewSession(partition=partition, cards=due, reviewer=self)

    def rate_card(self, card_id: str, rating: Rating, partition: Partition) -> Flashcard | None:
        """
        Schedule a card's next review and persist it.

        The rating is applied to the stored copy of the card, so edits made
        since the card was read are kept.

        Returns:
            The updated card, or None if the card no longer exists
        """
        card = self.flashcard_use_case.get_card(card_id, partition)
        if card is None:
            logger.warning("review_card_missing", flashcard_id=card_id, partition=str(partition))
            return None

        config = self.settings_use_case.get_repetition_config()
        updated = self.scheduler.schedule_next(card, Rating(rating), config, now=self.clock())
        return self.flashcard_use_case.update_card(updated, partition)
