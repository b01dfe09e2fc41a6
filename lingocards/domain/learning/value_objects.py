"""Value objects of the learning context."""

from dataclasses import dataclass
from enum import StrEnum

from lingocards.domain.common.exceptions import ValidationError
from lingocards.domain.common.value_object import ValueObject


class Rating(StrEnum):
    """Self-assessed recall quality given when a card is reviewed."""

    AGAIN = "again"
    HARD = "hard"
    GOOD = "good"
    EASY = "easy"


@dataclass(frozen=True)
class RepetitionConfig(ValueObject):
    """
    User-configurable review intervals, one per rating.

    Units differ per field: ``again`` is in minutes, ``hard`` in hours,
    ``good`` and ``easy`` in days.
    """

    again: float = 10
    hard: float = 1
    good: float = 1
    easy: float = 4

    def __post_init__(self) -> None:
        for field_name in ("again", "hard", "good", "easy"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int | float) or value <= 0:
                raise ValidationError(
                    "Repetition interval must be a positive number", field=field_name, value=value
                )


DEFAULT_REPETITION_CONFIG = RepetitionConfig()


@dataclass(frozen=True)
class DeletedWord(ValueObject):
    """Vocabulary of a reviewed card that was deleted, kept to suppress regeneration."""

    native_word: str
    target_word: str

    def avoidance_word(self, definition_mode: bool) -> str:
        return self.native_word if definition_mode else self.target_word
