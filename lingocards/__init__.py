"""Spaced-repetition vocabulary flashcards partitioned by language pair."""
