"""
Unit of Work interface.

The Unit of Work groups the writes of one business operation so they are
persisted together or not at all.

Example:
    with self.unit_of_work:
        self.deck_repository.save_all(partition, remaining_decks)
        self.flashcard_repository.save_all(partition, remaining_cards)
        self.unit_of_work.commit()
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    The Unit of Work:
    - Stages writes made while its context is open
    - Persists them atomically on commit
    - Discards them on rollback or when the context exits with an error

    Infrastructure layer provides concrete implementations
    (e.g., StoreUnitOfWork).
    """

    @abstractmethod
    def commit(self) -> bool:
        """
        Persist every staged write.

        Returns:
            True if the writes reached the store, False if they were dropped
        """
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """Discard every staged write."""
        raise NotImplementedError

    def __enter__(self) -> Self:
        """Enter the unit of work context."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """
        Exit the unit of work context.

        If an exception occurred, rollback. Otherwise, do nothing
        (commit must be called explicitly).
        """
        if exc_type is not None:
            self.rollback()
