"""History repositories."""

from lingocards.infrastructure.history.repositories.history_repository import HistoryRepository

__all__ = ["HistoryRepository"]
