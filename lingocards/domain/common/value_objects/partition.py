"""Language-pair partition key."""

from dataclasses import dataclass

from ..exceptions import ValidationError
from ..value_object import ValueObject


@dataclass(frozen=True)
class Partition(ValueObject):
    """
    The (native language, target language) scope of decks and cards.

    Kept as a composite key so that language names containing any separator
    can never collide. A partition where both languages are the same is a
    "definition mode" partition: the target side holds a definition rather
    than a translation.
    """

    native_language: str
    target_language: str

    def __post_init__(self) -> None:
        for field_name in ("native_language", "target_language"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                raise ValidationError("Language cannot be empty", field=field_name)
            object.__setattr__(self, field_name, value.strip())

    @property
    def is_definition_mode(self) -> bool:
        return self.native_language == self.target_language

    def __str__(self) -> str:
        return f"{self.native_language}->{self.target_language}"
