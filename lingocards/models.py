"""Database models."""

from typing import Any

from sqlalchemy import JSON, BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from lingocards.database import Base

# Global namespaces have no language pair; the key columns hold an empty string instead.
GLOBAL_LANGUAGE = ""


class StorageEntry(Base):
    """One serialized blob of the partition store."""

    __tablename__ = "storage_entries"

    namespace: Mapped[str] = mapped_column(String(50), primary_key=True)
    native_language: Mapped[str] = mapped_column(String(100), primary_key=True)
    target_language: Mapped[str] = mapped_column(String(100), primary_key=True)
    payload: Mapped[Any] = mapped_column(JSON, nullable=False)
    updated_at: Mapped[int] = mapped_column(BigInteger, nullable=False)

    def __repr__(self) -> str:
        """String representation of StorageEntry."""
        return (
            f"<StorageEntry(namespace='{self.namespace}', "
            f"native_language='{self.native_language}', "
            f"target_language='{self.target_language}')>"
        )
