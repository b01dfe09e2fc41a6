import pytest

from lingocards.domain.common.exceptions import ValidationError
from lingocards.domain.common.value_objects import DeckId, FlashcardId, Partition


def test_partition_strips_languages() -> None:
    partition = Partition(native_language="  English ", target_language="French ")

    assert partition.native_language == "English"
    assert partition.target_language == "French"


@pytest.mark.parametrize(("native", "target"), [("", "French"), ("English", "   ")])
def test_partition_rejects_empty_language(native: str, target: str) -> None:
    with pytest.raises(ValidationError, match="Language cannot be empty"):
        Partition(native_language=native, target_language=target)


def test_partitions_are_compared_by_both_languages() -> None:
    assert Partition("English", "French") == Partition("English", "French")
    assert Partition("English", "French") != Partition("French", "English")


def test_separator_characters_cannot_make_partitions_collide() -> None:
    """Names that would collide if joined with a separator stay distinct."""
    first = Partition(native_language="a_b", target_language="c")
    second = Partition(native_language="a", target_language="b_c")

    assert first != second
    assert len({first, second}) == 2


def test_definition_mode_when_languages_match() -> None:
    assert Partition("English", "English").is_definition_mode
    assert not Partition("English", "French").is_definition_mode


def test_generated_ids_are_unique() -> None:
    assert DeckId.generate() != DeckId.generate()
    assert FlashcardId.generate() != FlashcardId.generate()


def test_empty_id_raises_error() -> None:
    with pytest.raises(ValidationError):
        DeckId("")
