"""Partition store backends and the store-backed unit of work."""

from lingocards.infrastructure.storage.in_memory_store import InMemoryPartitionStore
from lingocards.infrastructure.storage.sqlalchemy_store import SqlAlchemyPartitionStore
from lingocards.infrastructure.storage.unit_of_work import StoreUnitOfWork

__all__ = ["InMemoryPartitionStore", "SqlAlchemyPartitionStore", "StoreUnitOfWork"]
