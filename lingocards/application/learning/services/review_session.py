"""
Review session over a snapshot of due cards.

State machine:
    Presenting(i, FRONT) --reveal--> Presenting(i, BACK)
    Presenting(i, BACK)  --rate-->   Presenting(i + 1, FRONT) | Complete
    any                  --end-->    Complete

The snapshot is taken once when the session starts. Edits made to the
store while the session runs are not reflected in the cards already
captured; a new session re-reads the due set.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol

import structlog

from lingocards.domain.common.exceptions import BusinessRuleViolationError
from lingocards.domain.common.value_objects import Partition
from lingocards.domain.learning.entities.flashcard import Flashcard
from lingocards.domain.learning.value_objects import Rating

logger = structlog.get_logger(__name__)


class CardSide(StrEnum):
    FRONT = "front"
    BACK = "back"


@dataclass(frozen=True)
class Presenting:
    index: int
    side: CardSide = CardSide.FRONT


@dataclass(frozen=True)
class Complete:
    reviewed: int
    ended_early: bool = False


ReviewState = Presenting | Complete


class CardReviewer(Protocol):
    """Applies a rating to a stored card and persists the result."""

    def rate_card(self, card_id: str, rating: Rating, partition: Partition) -> Flashcard | None: ...


@dataclass
class ReviewedCard:
    card: Flashcard
    rating: Rating
    updated: Flashcard | None


@dataclass
class ReviewSession:
    """Single-consumer, linear walk over the due cards of a partition."""

    partition: Partition
    cards: list[Flashcard]
    reviewer: CardReviewer
    state: ReviewState = field(init=False)
    history: list[ReviewedCard] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.cards = list(self.cards)
        self.state = Presenting(0) if self.cards else Complete(reviewed=0)

    @property
    def total(self) -> int:
        return len(self.cards)

    @property
    def is_complete(self) -> bool:
        return isinstance(self.state, Complete)

    @property
    def current_card(self) -> Flashcard | None:
        if isinstance(self.state, Presenting):
            return self.cards[self.state.index]
        return None

    @property
    def position(self) -> int:
        """1-based number of the card being presented, or total when complete."""
        if isinstance(self.state, Presenting):
            return self.state.index + 1
        return self.total

    def _presenting(self, action: str) -> Presenting:
        if not isinstance(self.state, Presenting):
            raise BusinessRuleViolationError(
                "review_session_active", f"Cannot {action}: the review session is complete"
            )
        return self.state

    def reveal(self) -> Flashcard:
        """Show the back of the current card."""
        state = self._presenting("reveal a card")
        self.state = Presenting(state.index, CardSide.BACK)
        return self.cards[state.index]

    def rate(self, rating: Rating | str) -> Flashcard | None:
        """
        Rate the current card and advance to the next one.

        Returns:
            The persisted card, or None if it no longer exists in the store

        Raises:
            BusinessRuleViolationError: If the answer is not revealed yet or the
                session is complete
        """
        state = self._presenting("rate a card")
        if state.side is not CardSide.BACK:
            raise BusinessRuleViolationError(
                "answer_revealed_before_rating", "Reveal the answer before rating the card"
            )

        rating = Rating(rating)
        card = self.cards[state.index]
        updated = self.reviewer.rate_card(card.id.value, rating, self.partition)
        self.history.append(ReviewedCard(card=card, rating=rating, updated=updated))

        next_index = state.index + 1
        if next_index == self.total:
            self.state = Complete(reviewed=len(self.history))
            logger.info(
                "review_session_complete", partition=str(self.partition), reviewed=len(self.history)
            )
        else:
            self.state = Presenting(next_index)
        return updated

    def end(self) -> Complete:
        """Stop early. Ratings already given stay persisted."""
        if not isinstance(self.state, Complete):
            self.state = Complete(reviewed=len(self.history), ended_early=True)
            logger.info(
                "review_session_ended", partition=str(self.partition), reviewed=len(self.history)
            )
        return self.state
