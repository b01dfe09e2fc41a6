"""Port for the durable key-value store holding serialized partitions."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Protocol

from lingocards.domain.common.exceptions import ValidationError
from lingocards.domain.common.value_objects import Partition


class Namespace(StrEnum):
    """Logical key families of the store."""

    # Per partition
    DECKS = "decks"
    FLASHCARDS = "flashcards"
    DELETED_WORDS = "deleted_words"

    # Global
    PROMPT_HISTORY = "prompt_history"
    LANGUAGE_PAIRS = "language_pairs"
    REPETITION_CONFIG = "repetition_config"
    API_KEY = "api_key"


PARTITIONED_NAMESPACES = frozenset(
    {Namespace.DECKS, Namespace.FLASHCARDS, Namespace.DELETED_WORDS}
)


@dataclass(frozen=True)
class StorageKey:
    """Key of one serialized blob: a namespace, plus a partition for partitioned namespaces."""

    namespace: Namespace
    partition: Partition | None = None

    def __post_init__(self) -> None:
        partitioned = self.namespace in PARTITIONED_NAMESPACES
        if partitioned and self.partition is None:
            raise ValidationError(
                f"Namespace {self.namespace} requires a partition", field="partition"
            )
        if not partitioned and self.partition is not None:
            raise ValidationError(
                f"Namespace {self.namespace} is global and takes no partition", field="partition"
            )

    def __str__(self) -> str:
        if self.partition is None:
            return self.namespace.value
        return f"{self.namespace.value}[{self.partition}]"

    @classmethod
    def scoped(cls, namespace: Namespace, partition: Partition) -> "StorageKey":
        return cls(namespace=namespace, partition=partition)

    @classmethod
    def global_(cls, namespace: Namespace) -> "StorageKey":
        return cls(namespace=namespace)


class PartitionStoreProtocol(Protocol):
    """
    Protocol for a durable key-value store.

    Values are JSON-compatible Python structures. Backends raise
    StorageUnavailableError when the underlying store cannot be reached.
    """

    def read(self, key: StorageKey) -> Any | None:
        """
        Read the value stored under a key.

        Returns:
            The stored value, or None if the key is absent
        """
        ...

    def write(self, key: StorageKey, value: Any) -> None:
        """Store a value under a key, replacing any previous value."""
        ...

    def write_many(self, entries: Mapping[StorageKey, Any]) -> None:
        """
        Store several values atomically.

        A None value deletes its key.
        """
        ...

    def delete(self, key: StorageKey) -> None:
        """Remove a key. Missing keys are ignored."""
        ...

    def keys(self, namespace: Namespace) -> list[StorageKey]:
        """List every stored key of a namespace."""
        ...

    def is_available(self) -> bool:
        """Health check for callers that surface storage problems to the user."""
        ...
