"""
Application constants.

This module contains constants used throughout the application.
"""

MINUTE_MS = 60 * 1000
HOUR_MS = 60 * MINUTE_MS
DAY_MS = 24 * HOUR_MS

# Bucket used by per-deck counts for cards whose deck no longer exists
UNASSIGNED_DECK_KEY = "unassigned"

PROMPT_HISTORY_LIMIT = 20
LANGUAGE_PAIR_HISTORY_LIMIT = 10
RELEVANT_PROMPT_LIMIT = 10

DEFAULT_PROMPT_SUGGESTIONS = (
    "Add 20 most common greetings",
    "Basic travel phrases and vocabulary",
    "Food and restaurant vocabulary",
)
