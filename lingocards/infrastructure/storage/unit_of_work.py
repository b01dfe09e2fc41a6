"""
Unit of Work over a partition store.

Repositories read and write through this object rather than the raw store.
Outside a ``with`` block every write goes straight to the store; inside one,
writes are staged and reach the store in a single ``write_many`` when the
outermost block commits. Reads made inside a block are the basis of the
staged writes, so a failing store raises there instead of reading as empty.
"""

from collections.abc import Mapping
from copy import deepcopy
from types import TracebackType
from typing import Any, Self

import structlog

from lingocards.application.common.unit_of_work import UnitOfWork
from lingocards.application.ports.partition_store import (
    Namespace,
    PartitionStoreProtocol,
    StorageKey,
)
from lingocards.domain.common.exceptions import StorageUnavailableError

logger = structlog.get_logger(__name__)


class StoreUnitOfWork(UnitOfWork):
    """
    Store-backed Unit of Work and the store boundary.

    Outside a transaction StorageUnavailableError raised by the backend stops
    here: reads return None, writes are dropped and reported as not persisted.
    Inside one, read failures propagate so the caller can abandon the
    operation instead of overwriting data it could not see.
    """

    def __init__(self, store: PartitionStoreProtocol) -> None:
        self.store = store
        self._depth = 0
        self._staged: dict[StorageKey, Any] = {}

    @property
    def in_transaction(self) -> bool:
        return self._depth > 0

    def __enter__(self) -> Self:
        self._depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        super().__exit__(exc_type, exc_val, exc_tb)
        self._depth -= 1
        if self._depth == 0 and self._staged:
            logger.warning("uncommitted_writes_discarded", keys=len(self._staged))
            self._staged.clear()

    def commit(self) -> bool:
        """
        Flush staged writes atomically.

        A commit inside a nested block defers to the outermost one.
        """
        if self._depth > 1 or not self._staged:
            return True

        staged, self._staged = self._staged, {}
        try:
            self.store.write_many(staged)
        except StorageUnavailableError as e:
            logger.error(
                "storage_unavailable", operation="commit", keys=len(staged), reason=e.reason
            )
            return False
        return True

    def rollback(self) -> None:
        if self._staged:
            logger.info("staged_writes_rolled_back", keys=len(self._staged))
        self._staged.clear()

    def read(self, key: StorageKey) -> Any | None:
        if self.in_transaction:
            return self.read_for_update(key)
        try:
            return self.store.read(key)
        except StorageUnavailableError as e:
            logger.warning("storage_unavailable", operation="read", key=str(key), reason=e.reason)
            return None

    def read_for_update(self, key: StorageKey) -> Any | None:
        """
        Read a value that a write is about to be built on.

        Raises:
            StorageUnavailableError: If the store cannot be read
        """
        if key in self._staged:
            return deepcopy(self._staged[key])
        return self.store.read(key)

    def write(self, key: StorageKey, value: Any) -> bool:
        """
        Write a value, or stage it inside a transaction.

        A None value deletes the key.

        Returns:
            False if the store rejected an immediate write
        """
        return self.write_many({key: value})

    def write_many(self, entries: Mapping[StorageKey, Any]) -> bool:
        if self.in_transaction:
            for key, value in entries.items():
                self._staged[key] = deepcopy(value)
            return True

        try:
            self.store.write_many(entries)
        except StorageUnavailableError as e:
            logger.error(
                "storage_unavailable", operation="write", keys=len(entries), reason=e.reason
            )
            return False
        return True

    def delete(self, key: StorageKey) -> bool:
        return self.write(key, None)

    def keys(self, namespace: Namespace) -> list[StorageKey]:
        try:
            keys = self.store.keys(namespace)
        except StorageUnavailableError as e:
            logger.warning(
                "storage_unavailable", operation="keys", namespace=namespace.value, reason=e.reason
            )
            keys = []

        for key, value in self._staged.items():
            if key.namespace != namespace:
                continue
            if value is None and key in keys:
                keys.remove(key)
            elif value is not None and key not in keys:
                keys.append(key)
        return keys

    def is_available(self) -> bool:
        return self.store.is_available()
