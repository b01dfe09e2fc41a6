from lingocards.application.history.use_cases.language_pair_use_case import LanguagePairUseCase
from lingocards.application.learning.use_cases.deck_use_case import DeckUseCase
from lingocards.application.learning.use_cases.flashcard_use_case import FlashcardUseCase
from lingocards.domain.common.value_objects import Partition


def test_recent_pairs_are_deduplicated_newest_first(
    language_pair_use_case: LanguagePairUseCase,
    partition: Partition,
    other_partition: Partition,
) -> None:
    language_pair_use_case.record_language_pair(partition)
    language_pair_use_case.record_language_pair(other_partition)
    language_pair_use_case.record_language_pair(partition)

    assert language_pair_use_case.recent_language_pairs() == [partition, other_partition]


def test_recent_pairs_are_capped_at_ten(language_pair_use_case: LanguagePairUseCase) -> None:
    for i in range(12):
        language_pair_use_case.record_language_pair(Partition("English", f"Language {i}"))

    pairs = language_pair_use_case.recent_language_pairs()

    assert len(pairs) == 10
    assert pairs[0] == Partition("English", "Language 11")


def test_partitions_with_data_are_listed(
    language_pair_use_case: LanguagePairUseCase,
    deck_use_case: DeckUseCase,
    flashcard_use_case: FlashcardUseCase,
) -> None:
    french = Partition("English", "French")
    spanish_from_german = Partition("German", "Spanish")
    spanish = Partition("English", "Spanish")
    for p in (spanish_from_german, french, spanish):
        deck_use_case.create_deck("Basics", None, p)

    assert language_pair_use_case.list_partitions() == [french, spanish, spanish_from_german]
    assert language_pair_use_case.target_languages() == ["French", "Spanish"]
    assert language_pair_use_case.native_languages_for_target("Spanish") == ["English", "German"]


def test_partition_without_decks_is_not_listed(
    language_pair_use_case: LanguagePairUseCase,
    deck_use_case: DeckUseCase,
    partition: Partition,
) -> None:
    deck = deck_use_case.create_deck("Basics", None, partition)
    deck_use_case.delete_deck(deck.id.value, partition)

    assert language_pair_use_case.list_partitions() == []
