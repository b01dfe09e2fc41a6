"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import uuid4

from .exceptions import ValidationError
from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Identifiers are opaque strings, stable for the lifetime of the entity
    within its partition. Subclassing keeps deck and card ids from being mixed up.

    Example:
        @dataclass(frozen=True)
        class DeckId(EntityId):
            pass

        deck_id = DeckId("1714380000000")
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError(f"{self.__class__.__name__} cannot be empty", field="id")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> Self:
        """Create a fresh random identifier."""
        return cls(uuid4().hex)

    def to_primitive(self) -> str:
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
