from unittest.mock import patch

import pytest

from lingocards.application.learning.use_cases.deck_use_case import DeckUseCase
from lingocards.application.learning.use_cases.flashcard_use_case import FlashcardUseCase
from lingocards.application.ports.partition_store import Namespace
from lingocards.constants import DAY_MS, UNASSIGNED_DECK_KEY
from lingocards.domain.common.exceptions import StorageUnavailableError, ValidationError
from lingocards.domain.common.value_objects import DeckId, Partition
from lingocards.domain.learning.entities.deck import Deck
from lingocards.domain.learning.services.review_scheduler import ReviewScheduler
from lingocards.domain.learning.value_objects import DEFAULT_REPETITION_CONFIG, Rating
from lingocards.infrastructure.learning.repositories import (
    DeletedWordRepository,
    FlashcardRepository,
)
from lingocards.infrastructure.storage.in_memory_store import InMemoryPartitionStore
from tests.conftest import START_MS, FixedClock, fail_next_reads, make_card


class TestAddCard:
    def test_add_card(
        self, flashcard_use_case: FlashcardUseCase, partition: Partition, deck: Deck
    ) -> None:
        card = make_card(deck.id.value)

        assert flashcard_use_case.add_card(card, partition) is True
        assert flashcard_use_case.get_card(card.id.value, partition) == card

    def test_add_card_requires_existing_deck(
        self, flashcard_use_case: FlashcardUseCase, partition: Partition
    ) -> None:
        with pytest.raises(ValidationError, match="does not exist"):
            flashcard_use_case.add_card(make_card("missing"), partition)

        assert flashcard_use_case.list_cards(partition) == []

    def test_duplicate_id_is_skipped(
        self, flashcard_use_case: FlashcardUseCase, partition: Partition, deck: Deck
    ) -> None:
        card = make_card(deck.id.value, card_id="x")

        flashcard_use_case.add_card(card, partition)
        assert flashcard_use_case.add_card(card, partition) is False

        assert len(flashcard_use_case.list_cards(partition)) == 1


class TestSaveCards:
    def test_saving_same_card_twice_keeps_one(
        self, flashcard_use_case: FlashcardUseCase, partition: Partition, deck: Deck
    ) -> None:
        card = make_card(deck.id.value, card_id="x")

        first = flashcard_use_case.save_cards([card], partition, deck.id.value)
        second = flashcard_use_case.save_cards([card], partition, deck.id.value)

        assert (first.saved, first.skipped) == (1, 0)
        assert (second.saved, second.skipped) == (0, 1)
        assert [c.id.value for c in flashcard_use_case.list_cards(partition)] == ["x"]

    def test_duplicates_within_batch_are_skipped(
        self, flashcard_use_case: FlashcardUseCase, partition: Partition, deck: Deck
    ) -> None:
        result = flashcard_use_case.save_cards(
            [
                make_card(deck.id.value, "One", "Un", card_id="1"),
                make_card(deck.id.value, "Uno", "Un", card_id="1"),
                make_card(deck.id.value, "Two", "Deux", card_id="2"),
            ],
            partition,
            deck.id.value,
        )

        assert (result.saved, result.skipped, result.total) == (2, 1, 3)
        assert [c.native_word for c in flashcard_use_case.list_cards(partition)] == ["One", "Two"]

    def test_cards_are_stamped_with_deck(
        self,
        deck_use_case: DeckUseCase,
        flashcard_use_case: FlashcardUseCase,
        partition: Partition,
        deck: Deck,
    ) -> None:
        travel = deck_use_case.create_deck("Travel", None, partition)

        flashcard_use_case.save_cards([make_card(deck.id.value)], partition, travel.id.value)

        assert len(flashcard_use_case.list_cards(partition, travel.id.value)) == 1
        assert flashcard_use_case.list_cards(partition, deck.id.value) == []

    def test_save_into_missing_deck_is_rejected(
        self, flashcard_use_case: FlashcardUseCase, partition: Partition, deck: Deck
    ) -> None:
        with pytest.raises(ValidationError):
            flashcard_use_case.save_cards([make_card(deck.id.value)], partition, "missing")


class TestUpdateCard:
    def test_update_card_replaces_by_id(
        self, flashcard_use_case: FlashcardUseCase, partition: Partition, deck: Deck
    ) -> None:
        card = make_card(deck.id.value)
        flashcard_use_case.add_card(card, partition)

        card.update_content(target_word="Salut")
        flashcard_use_case.update_card(card, partition)

        stored = flashcard_use_case.get_card(card.id.value, partition)
        assert stored is not None
        assert stored.target_word == "Salut"

    def test_update_unknown_card_is_noop(
        self, flashcard_use_case: FlashcardUseCase, partition: Partition, deck: Deck
    ) -> None:
        assert flashcard_use_case.update_card(make_card(deck.id.value), partition) is None
        assert flashcard_use_case.list_cards(partition) == []

    def test_update_into_missing_deck_is_rejected(
        self, flashcard_use_case: FlashcardUseCase, partition: Partition, deck: Deck
    ) -> None:
        card = make_card(deck.id.value)
        flashcard_use_case.add_card(card, partition)

        with pytest.raises(ValidationError):
            flashcard_use_case.update_card(card.in_deck(DeckId("missing")), partition)


class TestDueCards:
    def test_fresh_card_is_due_until_rated_easy(
        self,
        flashcard_use_case: FlashcardUseCase,
        partition: Partition,
        deck: Deck,
        clock: FixedClock,
    ) -> None:
        card = make_card(deck.id.value)
        flashcard_use_case.add_card(card, partition)
        assert flashcard_use_case.due_cards(partition) == [card]

        scheduled = ReviewScheduler().schedule_next(
            card, Rating.EASY, DEFAULT_REPETITION_CONFIG, now=clock()
        )
        flashcard_use_case.update_card(scheduled, partition)

        assert flashcard_use_case.due_cards(partition) == []
        due_later = flashcard_use_case.due_cards(partition, now=clock() + 4 * DAY_MS)
        assert [c.id for c in due_later] == [card.id]
        assert due_later[0].repetition_level == scheduled.repetition_level

    def test_due_cards_filter_by_deck(
        self,
        deck_use_case: DeckUseCase,
        flashcard_use_case: FlashcardUseCase,
        partition: Partition,
        deck: Deck,
    ) -> None:
        other = deck_use_case.create_deck("Other", None, partition)
        flashcard_use_case.add_card(make_card(deck.id.value, "A", "A"), partition)
        flashcard_use_case.add_card(make_card(other.id.value, "B", "B"), partition)

        due = flashcard_use_case.due_cards(partition, deck.id.value)

        assert [c.native_word for c in due] == ["A"]


class TestDeleteCards:
    def test_delete_cards_returns_removed_count(
        self, flashcard_use_case: FlashcardUseCase, partition: Partition, deck: Deck
    ) -> None:
        keep = make_card(deck.id.value, "Keep", "Garder")
        drop = make_card(deck.id.value, "Drop", "Lacher")
        flashcard_use_case.save_cards([keep, drop], partition, deck.id.value)

        removed = flashcard_use_case.delete_cards([drop.id.value, "unknown"], partition)

        assert removed == 1
        assert flashcard_use_case.list_cards(partition) == [keep]

    def test_delete_unknown_cards_returns_zero(
        self, flashcard_use_case: FlashcardUseCase, partition: Partition, deck: Deck
    ) -> None:
        assert flashcard_use_case.delete_cards(["nope"], partition) == 0

    def test_reviewed_cards_are_remembered(
        self,
        flashcard_use_case: FlashcardUseCase,
        deleted_word_repository: DeletedWordRepository,
        partition: Partition,
        deck: Deck,
    ) -> None:
        reviewed = make_card(deck.id.value, "Cat", "Chat", last_reviewed=START_MS)
        fresh = make_card(deck.id.value, "Dog", "Chien")
        flashcard_use_case.save_cards([reviewed, fresh], partition, deck.id.value)

        flashcard_use_case.delete_cards([reviewed.id.value, fresh.id.value], partition)

        words = deleted_word_repository.find_all(partition)
        assert [(w.native_word, w.target_word) for w in words] == [("Cat", "Chat")]

    def test_clear_cards_leaves_no_deleted_words(
        self,
        flashcard_use_case: FlashcardUseCase,
        deleted_word_repository: DeletedWordRepository,
        partition: Partition,
        deck: Deck,
    ) -> None:
        flashcard_use_case.add_card(
            make_card(deck.id.value, last_reviewed=START_MS), partition
        )

        assert flashcard_use_case.clear_cards(partition) == 1
        assert flashcard_use_case.list_cards(partition) == []
        assert deleted_word_repository.find_all(partition) == []


class TestMoveCards:
    def test_move_cards_to_other_deck(
        self,
        deck_use_case: DeckUseCase,
        flashcard_use_case: FlashcardUseCase,
        partition: Partition,
        deck: Deck,
    ) -> None:
        target = deck_use_case.create_deck("Target", None, partition)
        card = make_card(deck.id.value)
        flashcard_use_case.add_card(card, partition)

        moved = flashcard_use_case.move_cards([card.id.value], target.id.value, partition)

        assert moved == 1
        stored = flashcard_use_case.get_card(card.id.value, partition)
        assert stored is not None
        assert stored.deck_id == target.id

    def test_move_to_missing_deck_is_rejected(
        self, flashcard_use_case: FlashcardUseCase, partition: Partition, deck: Deck
    ) -> None:
        card = make_card(deck.id.value)
        flashcard_use_case.add_card(card, partition)

        with pytest.raises(ValidationError):
            flashcard_use_case.move_cards([card.id.value], "missing", partition)

        stored = flashcard_use_case.get_card(card.id.value, partition)
        assert stored is not None
        assert stored.deck_id == deck.id


class TestCountByDeck:
    def test_counts_include_empty_decks_and_stale_cards(
        self,
        deck_use_case: DeckUseCase,
        flashcard_use_case: FlashcardUseCase,
        flashcard_repository: FlashcardRepository,
        partition: Partition,
        deck: Deck,
    ) -> None:
        empty = deck_use_case.create_deck("Empty", None, partition)
        flashcard_use_case.save_cards(
            [make_card(deck.id.value, "A", "A"), make_card(deck.id.value, "B", "B")],
            partition,
            deck.id.value,
        )
        # A card left behind by a deck that no longer exists
        cards = flashcard_repository.find_all(partition)
        cards.append(make_card("gone", "C", "C"))
        flashcard_repository.save_all(partition, cards)

        counts = flashcard_use_case.count_by_deck(partition)

        assert counts == {deck.id.value: 2, empty.id.value: 0, UNASSIGNED_DECK_KEY: 1}


class TestStorageFailures:
    def test_failed_read_aborts_card_writes(
        self,
        flashcard_use_case: FlashcardUseCase,
        store: InMemoryPartitionStore,
        partition: Partition,
        deck: Deck,
    ) -> None:
        first = make_card(deck.id.value, "Cat", "Chat")
        second = make_card(deck.id.value, "Dog", "Chien")
        flashcard_use_case.add_card(first, partition)
        flashcard_use_case.add_card(second, partition)

        with fail_next_reads(store):
            assert flashcard_use_case.add_card(make_card(deck.id.value), partition) is False
        with fail_next_reads(store):
            result = flashcard_use_case.save_cards(
                [make_card(deck.id.value, "Bird", "Oiseau")], partition, deck.id.value
            )
        with fail_next_reads(store):
            assert flashcard_use_case.move_cards([first.id.value], deck.id.value, partition) == 0
        with fail_next_reads(store):
            assert flashcard_use_case.clear_cards(partition) == 0

        assert result.saved == 0
        assert [c.id for c in flashcard_use_case.list_cards(partition)] == [first.id, second.id]

    def test_failed_read_does_not_drop_deleted_words(
        self,
        flashcard_use_case: FlashcardUseCase,
        deleted_word_repository: DeletedWordRepository,
        store: InMemoryPartitionStore,
        partition: Partition,
        deck: Deck,
    ) -> None:
        cards = [
            make_card(deck.id.value, "Cat", "Chat", next_review=START_MS),
            make_card(deck.id.value, "Dog", "Chien", next_review=START_MS),
        ]
        for card in cards:
            flashcard_use_case.add_card(card, partition)
        flashcard_use_case.delete_cards([cards[0].id.value], partition)

        with fail_next_reads(store, namespace=Namespace.DELETED_WORDS):
            assert flashcard_use_case.delete_cards([cards[1].id.value], partition) == 0

        assert len(flashcard_use_case.list_cards(partition)) == 1
        assert [w.target_word for w in deleted_word_repository.find_all(partition)] == ["Chat"]

    def test_delete_reports_nothing_removed_when_commit_fails(
        self,
        flashcard_use_case: FlashcardUseCase,
        store: InMemoryPartitionStore,
        partition: Partition,
        deck: Deck,
    ) -> None:
        card = make_card(deck.id.value)
        flashcard_use_case.add_card(card, partition)

        with patch.object(
            store, "write_many", side_effect=StorageUnavailableError("write_many", "offline")
        ):
            assert flashcard_use_case.delete_cards([card.id.value], partition) == 0
            assert flashcard_use_case.update_card(card, partition) is None

        assert len(flashcard_use_case.list_cards(partition)) == 1
