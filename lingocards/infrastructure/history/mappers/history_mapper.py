"""Mappers for history record ↔ Domain conversion."""

from lingocards.domain.common.value_objects import Partition
from lingocards.domain.history.value_objects import PromptHistoryEntry
from lingocards.infrastructure.history.schemas import LanguagePairRecord, PromptHistoryRecord


class PromptHistoryMapper:
    """Mapper for PromptHistoryEntry record ↔ Domain conversion."""

    def to_domain(self, record: PromptHistoryRecord) -> PromptHistoryEntry:
        return PromptHistoryEntry(
            prompt=record.prompt,
            partition=Partition(
                native_language=record.native_language, target_language=record.target_language
            ),
            timestamp=record.timestamp,
        )

    def to_record(self, entry: PromptHistoryEntry) -> PromptHistoryRecord:
        return PromptHistoryRecord(
            prompt=entry.prompt,
            native_language=entry.partition.native_language,
            target_language=entry.partition.target_language,
            timestamp=entry.timestamp,
        )


class LanguagePairMapper:
    """Mapper for Partition record ↔ Domain conversion."""

    def to_domain(self, record: LanguagePairRecord) -> Partition:
        return Partition(
            native_language=record.native_language, target_language=record.target_language
        )

    def to_record(self, partition: Partition) -> LanguagePairRecord:
        return LanguagePairRecord(
            native_language=partition.native_language,
            target_language=partition.target_language,
        )
