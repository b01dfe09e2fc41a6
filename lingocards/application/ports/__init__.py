"""
Application ports (interfaces for external dependencies).

Ports define the boundaries between the application layer and
the infrastructure layer. They are interfaces that the infrastructure
layer must implement.

Types of ports:
- Storage port: the partitioned key-value store
- Service ports: External services (the AI card generator)
"""

from .partition_store import (
    PARTITIONED_NAMESPACES,
    Namespace,
    PartitionStoreProtocol,
    StorageKey,
)

__all__ = [
    "PARTITIONED_NAMESPACES",
    "Namespace",
    "PartitionStoreProtocol",
    "StorageKey",
]
