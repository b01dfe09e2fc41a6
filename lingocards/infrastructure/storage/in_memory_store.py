"""Process-local partition store."""

from collections.abc import Mapping
from copy import deepcopy
from typing import Any

from lingocards.application.ports.partition_store import Namespace, StorageKey
from lingocards.domain.common.exceptions import StorageUnavailableError


class InMemoryPartitionStore:
    """
    Dictionary-backed store for tests and ephemeral sessions.

    Values are deep-copied on the way in and out so callers never share
    mutable state with the store. Setting ``available`` to False makes every
    operation raise StorageUnavailableError.
    """

    def __init__(self, initial: Mapping[StorageKey, Any] | None = None) -> None:
        self._data: dict[StorageKey, Any] = {
            key: deepcopy(value) for key, value in (initial or {}).items()
        }
        self.available = True

    def _check(self, operation: str) -> None:
        if not self.available:
            raise StorageUnavailableError(operation, "in-memory store switched off")

    def read(self, key: StorageKey) -> Any | None:
        self._check("read")
        return deepcopy(self._data.get(key))

    def write(self, key: StorageKey, value: Any) -> None:
        self._check("write")
        self._data[key] = deepcopy(value)

    def write_many(self, entries: Mapping[StorageKey, Any]) -> None:
        self._check("write_many")
        for key, value in entries.items():
            if value is None:
                self._data.pop(key, None)
            else:
                self._data[key] = deepcopy(value)

    def delete(self, key: StorageKey) -> None:
        self._check("delete")
        self._data.pop(key, None)

    def keys(self, namespace: Namespace) -> list[StorageKey]:
        self._check("keys")
        return [key for key in self._data if key.namespace == namespace]

    def is_available(self) -> bool:
        return self.available
