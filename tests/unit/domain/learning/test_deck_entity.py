import pytest

from lingocards.domain.common.exceptions import ValidationError
from lingocards.domain.common.value_objects import DeckId
from lingocards.domain.learning.entities.deck import Deck


def test_create_deck() -> None:
    deck = Deck.create(name="Basics", description="Everyday words", now=1000)

    assert deck.name == "Basics"
    assert deck.description == "Everyday words"
    assert deck.created_at == 1000
    assert deck.updated_at == 1000
    assert deck.id.value


def test_blank_description_is_dropped() -> None:
    deck = Deck.create(name="Basics", description="   ", now=1000)

    assert deck.description is None


def test_empty_name_raises_error() -> None:
    with pytest.raises(ValidationError, match="Deck name cannot be empty"):
        Deck.create(name="  ", description=None, now=1000)


def test_update_details_refreshes_updated_at_only() -> None:
    deck = Deck.create_with_id(
        id=DeckId("d1"), name="Basics", description=None, created_at=1000, updated_at=1000
    )

    deck.update_details("Travel", "On the road", now=5000)

    assert deck.name == "Travel"
    assert deck.description == "On the road"
    assert deck.created_at == 1000
    assert deck.updated_at == 5000


def test_update_details_rejects_empty_name() -> None:
    deck = Deck.create(name="Basics", description=None, now=1000)

    with pytest.raises(ValidationError):
        deck.update_details("", None, now=2000)

    assert deck.name == "Basics"


def test_decks_are_equal_by_identity() -> None:
    deck = Deck.create_with_id(
        id=DeckId("d1"), name="Basics", description=None, created_at=0, updated_at=0
    )
    renamed = Deck.create_with_id(
        id=DeckId("d1"), name="Travel", description="Trips", created_at=0, updated_at=5
    )

    assert renamed == deck
    assert hash(renamed) == hash(deck)
