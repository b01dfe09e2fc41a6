"""Repository for the global prompt and language pair history."""

from lingocards.application.ports.partition_store import Namespace, StorageKey
from lingocards.domain.common.value_objects import Partition
from lingocards.domain.history.value_objects import PromptHistoryEntry
from lingocards.infrastructure.history.mappers import LanguagePairMapper, PromptHistoryMapper
from lingocards.infrastructure.history.schemas import LanguagePairRecord, PromptHistoryRecord
from lingocards.infrastructure.storage.records import dump_list, load_list
from lingocards.infrastructure.storage.unit_of_work import StoreUnitOfWork

PROMPT_HISTORY_KEY = StorageKey.global_(Namespace.PROMPT_HISTORY)
LANGUAGE_PAIRS_KEY = StorageKey.global_(Namespace.LANGUAGE_PAIRS)


class HistoryRepository:
    """Repository for history lists stored newest first."""

    def __init__(self, store: StoreUnitOfWork) -> None:
        self.store = store
        self.prompt_mapper = PromptHistoryMapper()
        self.language_pair_mapper = LanguagePairMapper()

    def find_prompts(self) -> list[PromptHistoryEntry]:
        return load_list(
            self.store.read(PROMPT_HISTORY_KEY),
            PromptHistoryRecord,
            self.prompt_mapper.to_domain,
            PROMPT_HISTORY_KEY,
        )

    def save_prompts(self, entries: list[PromptHistoryEntry]) -> bool:
        records = dump_list(self.prompt_mapper.to_record(entry) for entry in entries)
        return self.store.write(PROMPT_HISTORY_KEY, records)

    def find_language_pairs(self) -> list[Partition]:
        return load_list(
            self.store.read(LANGUAGE_PAIRS_KEY),
            LanguagePairRecord,
            self.language_pair_mapper.to_domain,
            LANGUAGE_PAIRS_KEY,
        )

    def save_language_pairs(self, partitions: list[Partition]) -> bool:
        records = dump_list(self.language_pair_mapper.to_record(pair) for pair in partitions)
        return self.store.write(LANGUAGE_PAIRS_KEY, records)
