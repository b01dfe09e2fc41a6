"""
Learning bounded context - Domain layer.

This context handles flashcard-based vocabulary learning:
- Deck and flashcard management per language pair
- Spaced repetition scheduling

Aggregates:
- Deck: A named group of flashcards
- Flashcard: A single vocabulary card with review metadata
"""
