"""Partition store persisted in a relational database."""

from collections.abc import Mapping
from typing import Any

import structlog
from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from lingocards.application.ports.partition_store import Namespace, StorageKey
from lingocards.domain.common.clock import Clock, now_millis
from lingocards.domain.common.exceptions import StorageUnavailableError
from lingocards.domain.common.value_objects import Partition
from lingocards.models import GLOBAL_LANGUAGE, StorageEntry

logger = structlog.get_logger(__name__)


def _primary_key(key: StorageKey) -> tuple[str, str, str]:
    if key.partition is None:
        return (key.namespace.value, GLOBAL_LANGUAGE, GLOBAL_LANGUAGE)
    return (key.namespace.value, key.partition.native_language, key.partition.target_language)


def _storage_key(entry: StorageEntry) -> StorageKey:
    namespace = Namespace(entry.namespace)
    if entry.native_language == GLOBAL_LANGUAGE:
        return StorageKey.global_(namespace)
    return StorageKey.scoped(
        namespace,
        Partition(native_language=entry.native_language, target_language=entry.target_language),
    )


class SqlAlchemyPartitionStore:
    """
    Store keeping one ``storage_entries`` row per key.

    The language pair is part of the composite primary key, so partitions
    can never collide whatever characters the language names contain.
    """

    def __init__(self, session_factory: sessionmaker[Session], clock: Clock = now_millis) -> None:
        self.session_factory = session_factory
        self.clock = clock

    def read(self, key: StorageKey) -> Any | None:
        try:
            with self.session_factory() as session:
                entry = session.get(StorageEntry, _primary_key(key))
                return entry.payload if entry else None
        except SQLAlchemyError as e:
            raise StorageUnavailableError("read", str(e)) from e

    def write(self, key: StorageKey, value: Any) -> None:
        self.write_many({key: value})

    def write_many(self, entries: Mapping[StorageKey, Any]) -> None:
        now = self.clock()
        try:
            with self.session_factory() as session, session.begin():
                for key, value in entries.items():
                    entry = session.get(StorageEntry, _primary_key(key))
                    if value is None:
                        if entry is not None:
                            session.delete(entry)
                    elif entry is None:
                        namespace, native, target = _primary_key(key)
                        session.add(
                            StorageEntry(
                                namespace=namespace,
                                native_language=native,
                                target_language=target,
                                payload=value,
                                updated_at=now,
                            )
                        )
                    else:
                        entry.payload = value
                        entry.updated_at = now
        except SQLAlchemyError as e:
            raise StorageUnavailableError("write", str(e)) from e

        logger.debug("storage_entries_written", count=len(entries))

    def delete(self, key: StorageKey) -> None:
        self.write_many({key: None})

    def keys(self, namespace: Namespace) -> list[StorageKey]:
        stmt = (
            select(StorageEntry)
            .where(StorageEntry.namespace == namespace.value)
            .order_by(StorageEntry.target_language, StorageEntry.native_language)
        )
        try:
            with self.session_factory() as session:
                return [_storage_key(entry) for entry in session.execute(stmt).scalars()]
        except SQLAlchemyError as e:
            raise StorageUnavailableError("keys", str(e)) from e

    def is_available(self) -> bool:
        try:
            with self.session_factory() as session:
                session.execute(text("SELECT 1"))
        except SQLAlchemyError:
            logger.warning("storage_health_check_failed", exc_info=True)
            return False
        return True
