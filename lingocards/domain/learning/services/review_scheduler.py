"""
Domain service computing the next review of a flashcard.

This is a pure domain service with no infrastructure dependencies.
"""

from lingocards.constants import DAY_MS, HOUR_MS, MINUTE_MS
from lingocards.domain.common.clock import now_millis
from lingocards.domain.learning.entities.flashcard import Flashcard
from lingocards.domain.learning.value_objects import Rating, RepetitionConfig


class ReviewScheduler:
    """
    Fixed-interval scheduler: each rating maps to one configured interval.

    The repetition level is bookkeeping only. It moves with the rating
    (again -1 floored at 0, hard unchanged, good +1, easy +2) but is not fed
    back into the interval.
    """

    def interval_millis(self, rating: Rating, config: RepetitionConfig) -> int:
        """Length of the interval a rating schedules, in milliseconds."""
        match Rating(rating):
            case Rating.AGAIN:
                interval = config.again * MINUTE_MS
            case Rating.HARD:
                interval = config.hard * HOUR_MS
            case Rating.GOOD:
                interval = config.good * DAY_MS
            case Rating.EASY:
                interval = config.easy * DAY_MS
        # Sub-millisecond configs still have to land strictly after now
        return max(1, round(interval))

    def next_level(self, rating: Rating, level: int) -> int:
        match Rating(rating):
            case Rating.AGAIN:
                return max(0, level - 1)
            case Rating.HARD:
                return level
            case Rating.GOOD:
                return level + 1
            case Rating.EASY:
                return level + 2

    def schedule_next(
        self,
        card: Flashcard,
        rating: Rating,
        config: RepetitionConfig,
        now: int | None = None,
    ) -> Flashcard:
        """
        Apply a rating to a card.

        Args:
            card: The card being reviewed
            rating: The user's recall rating
            config: Interval configuration
            now: Review time in epoch ms, defaults to the current time

        Returns:
            A new card value; the input card is not modified and nothing is persisted
        """
        reviewed_at = now_millis() if now is None else now
        return card.with_review(
            last_reviewed=reviewed_at,
            next_review=reviewed_at + self.interval_millis(rating, config),
            repetition_level=self.next_level(rating, card.repetition_level),
        )


def format_time_until_review(next_review: int | None, now: int | None = None) -> str:
    """Human readable time left until a card's next review."""
    if not next_review:
        return "Not reviewed yet"

    diff = next_review - (now_millis() if now is None else now)
    if diff <= 0:
        return "Due now"

    days = diff // DAY_MS
    hours = diff // HOUR_MS
    minutes = diff // MINUTE_MS

    if days > 0:
        return f"{days} day{'s' if days > 1 else ''}"
    if hours > 0:
        return f"{hours} hour{'s' if hours > 1 else ''}"
    return f"{minutes} minute{'s' if minutes > 1 else ''}"
