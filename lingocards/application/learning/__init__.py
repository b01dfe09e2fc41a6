"""
Learning bounded context - Application layer.

Contains use cases for deck and flashcard management, the avoidance
tracker, card generation and review sessions.
"""
