"""Pytest configuration and fixtures."""

from typing import Any
from unittest.mock import patch

import pytest

from lingocards.application.history.use_cases.language_pair_use_case import LanguagePairUseCase
from lingocards.application.history.use_cases.prompt_history_use_case import (
    PromptHistoryUseCase,
)
from lingocards.application.learning.use_cases.avoidance_use_case import AvoidanceUseCase
from lingocards.application.learning.use_cases.deck_use_case import DeckUseCase
from lingocards.application.learning.use_cases.flashcard_use_case import FlashcardUseCase
from lingocards.application.learning.use_cases.review_use_case import ReviewUseCase
from lingocards.application.ports.partition_store import Namespace, StorageKey
from lingocards.application.settings.use_cases.settings_use_case import SettingsUseCase
from lingocards.domain.common.exceptions import StorageUnavailableError
from lingocards.domain.common.value_objects import DeckId, FlashcardId, Partition
from lingocards.domain.learning.entities.deck import Deck
from lingocards.domain.learning.entities.flashcard import Flashcard
from lingocards.domain.learning.services.review_scheduler import ReviewScheduler
from lingocards.infrastructure.history.repositories import HistoryRepository
from lingocards.infrastructure.learning.repositories import (
    DeckRepository,
    DeletedWordRepository,
    FlashcardRepository,
)
from lingocards.infrastructure.settings.repositories import SettingsRepository
from lingocards.infrastructure.storage.in_memory_store import InMemoryPartitionStore
from lingocards.infrastructure.storage.unit_of_work import StoreUnitOfWork

# 2024-01-01T00:00:00Z
START_MS = 1_704_067_200_000


class FixedClock:
    """Clock that only moves when a test moves it."""

    def __init__(self, now: int = START_MS) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, millis: int) -> int:
        self.now += millis
        return self.now


def make_card(
    deck_id: str,
    native_word: str = "Hello",
    target_word: str = "Bonjour",
    card_id: str | None = None,
    **review: int,
) -> Flashcard:
    """Build a card, optionally with review metadata (last_reviewed, next_review, ...)."""
    card = Flashcard.create(
        deck_id=DeckId(deck_id),
        native_word=native_word,
        target_word=target_word,
        native_example=f"{native_word}!",
        target_example=f"{target_word} !",
        id=FlashcardId(card_id) if card_id else None,
    )
    if review:
        card = card.with_review(
            last_reviewed=review.get("last_reviewed", START_MS),
            next_review=review.get("next_review", START_MS),
            repetition_level=review.get("repetition_level", 0),
        )
    return card


def fail_next_reads(
    store: InMemoryPartitionStore, count: int = 1, namespace: Namespace | None = None
) -> Any:
    """
    Patch the store so its next `count` reads raise StorageUnavailableError.

    With a namespace, only reads of that namespace fail.
    """
    original = store.read
    remaining = [count]

    def read(key: StorageKey) -> Any:
        if remaining[0] > 0 and namespace in (None, key.namespace):
            remaining[0] -= 1
            raise StorageUnavailableError("read", "connection reset")
        return original(key)

    return patch.object(store, "read", side_effect=read)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def partition() -> Partition:
    return Partition(native_language="English", target_language="French")


@pytest.fixture
def other_partition() -> Partition:
    return Partition(native_language="English", target_language="Spanish")


@pytest.fixture
def store() -> InMemoryPartitionStore:
    return InMemoryPartitionStore()


@pytest.fixture
def unit_of_work(store: InMemoryPartitionStore) -> StoreUnitOfWork:
    return StoreUnitOfWork(store)


@pytest.fixture
def deck_repository(unit_of_work: StoreUnitOfWork) -> DeckRepository:
    return DeckRepository(unit_of_work)


@pytest.fixture
def flashcard_repository(unit_of_work: StoreUnitOfWork) -> FlashcardRepository:
    return FlashcardRepository(unit_of_work)


@pytest.fixture
def deleted_word_repository(unit_of_work: StoreUnitOfWork) -> DeletedWordRepository:
    return DeletedWordRepository(unit_of_work)


@pytest.fixture
def history_repository(unit_of_work: StoreUnitOfWork) -> HistoryRepository:
    return HistoryRepository(unit_of_work)


@pytest.fixture
def settings_repository(unit_of_work: StoreUnitOfWork) -> SettingsRepository:
    return SettingsRepository(unit_of_work)


@pytest.fixture
def deck_use_case(
    deck_repository: DeckRepository,
    flashcard_repository: FlashcardRepository,
    unit_of_work: StoreUnitOfWork,
    clock: FixedClock,
) -> DeckUseCase:
    return DeckUseCase(
        deck_repository=deck_repository,
        flashcard_repository=flashcard_repository,
        unit_of_work=unit_of_work,
        clock=clock,
    )


@pytest.fixture
def flashcard_use_case(
    flashcard_repository: FlashcardRepository,
    deck_repository: DeckRepository,
    deleted_word_repository: DeletedWordRepository,
    unit_of_work: StoreUnitOfWork,
    clock: FixedClock,
) -> FlashcardUseCase:
    return FlashcardUseCase(
        flashcard_repository=flashcard_repository,
        deck_repository=deck_repository,
        deleted_word_repository=deleted_word_repository,
        unit_of_work=unit_of_work,
        clock=clock,
    )


@pytest.fixture
def avoidance_use_case(
    flashcard_repository: FlashcardRepository,
    deleted_word_repository: DeletedWordRepository,
) -> AvoidanceUseCase:
    return AvoidanceUseCase(
        flashcard_repository=flashcard_repository,
        deleted_word_repository=deleted_word_repository,
    )


@pytest.fixture
def settings_use_case(settings_repository: SettingsRepository) -> SettingsUseCase:
    return SettingsUseCase(settings_repository=settings_repository)


@pytest.fixture
def prompt_history_use_case(
    history_repository: HistoryRepository, unit_of_work: StoreUnitOfWork, clock: FixedClock
) -> PromptHistoryUseCase:
    return PromptHistoryUseCase(
        history_repository=history_repository, unit_of_work=unit_of_work, clock=clock
    )


@pytest.fixture
def language_pair_use_case(
    history_repository: HistoryRepository,
    deck_repository: DeckRepository,
    flashcard_repository: FlashcardRepository,
    unit_of_work: StoreUnitOfWork,
) -> LanguagePairUseCase:
    return LanguagePairUseCase(
        history_repository=history_repository,
        deck_repository=deck_repository,
        flashcard_repository=flashcard_repository,
        unit_of_work=unit_of_work,
    )


@pytest.fixture
def review_use_case(
    flashcard_use_case: FlashcardUseCase,
    settings_use_case: SettingsUseCase,
    clock: FixedClock,
) -> ReviewUseCase:
    return ReviewUseCase(
        flashcard_use_case=flashcard_use_case,
        settings_use_case=settings_use_case,
        scheduler=ReviewScheduler(),
        clock=clock,
    )


@pytest.fixture
def deck(deck_use_case: DeckUseCase, partition: Partition) -> Deck:
    return deck_use_case.create_deck("Basics", "Everyday words", partition)
