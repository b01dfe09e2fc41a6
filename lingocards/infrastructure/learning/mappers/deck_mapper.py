"""Mapper for Deck record ↔ Domain conversion."""

from lingocards.domain.common.value_objects import DeckId
from lingocards.domain.learning.entities.deck import Deck
from lingocards.infrastructure.learning.schemas import DeckRecord


class DeckMapper:
    """Mapper for Deck record ↔ Domain conversion."""

    def to_domain(self, record: DeckRecord) -> Deck:
        """Convert stored record to domain entity."""
        return Deck.create_with_id(
            id=DeckId(record.id),
            name=record.name,
            description=record.description,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    def to_record(self, deck: Deck) -> DeckRecord:
        """Convert domain entity to stored record."""
        return DeckRecord(
            id=deck.id.value,
            name=deck.name,
            description=deck.description,
            created_at=deck.created_at,
            updated_at=deck.updated_at,
        )
