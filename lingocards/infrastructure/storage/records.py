"""Helpers for turning stored JSON lists into domain objects and back."""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

import structlog
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from lingocards.application.ports.partition_store import StorageKey
from lingocards.domain.common.exceptions import CorruptStorageError, DomainError

logger = structlog.get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)
T = TypeVar("T")


def split_list(
    raw: Any,
    record_type: type[RecordT],
    to_domain: Callable[[RecordT], T],
    key: StorageKey,
) -> tuple[list[T], list[Any]]:
    """
    Parse a stored list into domain objects and the raw entries that failed.

    A record fails when it does not match its schema or breaks a domain rule.

    Raises:
        CorruptStorageError: If the stored value is not a list at all
    """
    if raw is None:
        return [], []
    if not isinstance(raw, list):
        raise CorruptStorageError(str(key), type(raw).__name__)

    items: list[T] = []
    unreadable: list[Any] = []
    for index, item in enumerate(raw):
        try:
            items.append(to_domain(record_type.model_validate(item)))
        except (PydanticValidationError, DomainError) as e:
            logger.warning("corrupt_record_skipped", key=str(key), index=index, error=str(e))
            unreadable.append(item)
    return items, unreadable


def load_list(
    raw: Any,
    record_type: type[RecordT],
    to_domain: Callable[[RecordT], T],
    key: StorageKey,
) -> list[T]:
    """Parse a stored list for reading, skipping corrupt entries."""
    try:
        items, _ = split_list(raw, record_type, to_domain, key)
    except CorruptStorageError as e:
        logger.warning("corrupt_storage_entry", key=str(key), reason=e.reason)
        return []
    return items


def unreadable_entries(
    raw: Any,
    record_type: type[RecordT],
    to_domain: Callable[[RecordT], T],
    key: StorageKey,
) -> list[Any]:
    """
    Raw entries of a stored list that do not parse.

    Saves write them back untouched so a rewrite never erases them.
    """
    return split_list(raw, record_type, to_domain, key)[1]


def dump_list(records: Iterable[BaseModel]) -> list[dict[str, Any]]:
    """Serialize records with their stored (camelCase) field names, omitting unset values."""
    return [record.model_dump(by_alias=True, exclude_none=True) for record in records]
