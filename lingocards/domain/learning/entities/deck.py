"""Deck entity grouping flashcards within a language pair."""

from dataclasses import dataclass

from lingocards.domain.common.entity import Entity
from lingocards.domain.common.exceptions import ValidationError
from lingocards.domain.common.value_objects import DeckId


@dataclass(eq=False)
class Deck(Entity[DeckId]):
    """
    A named collection of flashcards.

    Business Rules:
    - Name cannot be empty
    - A deck belongs to exactly one partition; the partition is the storage
      scope, so it is not repeated on the entity
    - Decks are only ever created explicitly, never as a side effect of saving cards
    """

    # Identity
    id: DeckId

    # Content
    name: str
    description: str | None = None

    # Timestamps (epoch ms)
    created_at: int = 0
    updated_at: int = 0

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name or not self.name.strip():
            raise ValidationError("Deck name cannot be empty", field="name")

    def update_details(self, name: str, description: str | None, now: int) -> None:
        """
        Rename the deck and replace its description.

        Raises:
            ValidationError: If name is empty
        """
        if not name or not name.strip():
            raise ValidationError("Deck name cannot be empty", field="name")
        self.name = name.strip()
        self.description = _clean_description(description)
        self.updated_at = now

    # Factory methods
    @classmethod
    def create(cls, name: str, description: str | None, now: int) -> "Deck":
        """Factory for creating a new deck with a fresh id."""
        if not name or not name.strip():
            raise ValidationError("Deck name cannot be empty", field="name")
        return cls(
            id=DeckId.generate(),
            name=name.strip(),
            description=_clean_description(description),
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: DeckId,
        name: str,
        description: str | None,
        created_at: int,
        updated_at: int,
    ) -> "Deck":
        """Factory for reconstituting a deck from persistence."""
        return cls(
            id=id,
            name=name,
            description=description,
            created_at=created_at,
            updated_at=updated_at,
        )


def _clean_description(description: str | None) -> str | None:
    if description is None:
        return None
    return description.strip() or None
