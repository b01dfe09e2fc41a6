"""
Domain layer.

The domain layer contains the core business logic of the application.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Decks and flashcards
- Value Objects: Partitions, identifiers, ratings, repetition config
- Domain Services: The stateless review scheduler
"""
