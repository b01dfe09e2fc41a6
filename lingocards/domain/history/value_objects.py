"""Value objects recorded by the generation history."""

from dataclasses import dataclass

from lingocards.domain.common.exceptions import ValidationError
from lingocards.domain.common.value_object import ValueObject
from lingocards.domain.common.value_objects import Partition


@dataclass(frozen=True)
class PromptHistoryEntry(ValueObject):
    """A generation prompt the user submitted for a language pair."""

    prompt: str
    partition: Partition
    timestamp: int

    def __post_init__(self) -> None:
        if not self.prompt or not self.prompt.strip():
            raise ValidationError("Prompt cannot be empty", field="prompt")

    def matches(self, prompt: str, partition: Partition) -> bool:
        return self.prompt == prompt and self.partition == partition
