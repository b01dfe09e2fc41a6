"""Repository for the vocabulary of deleted, already reviewed cards."""

from lingocards.application.ports.partition_store import Namespace, StorageKey
from lingocards.domain.common.value_objects import Partition
from lingocards.domain.learning.value_objects import DeletedWord
from lingocards.infrastructure.learning.mappers import DeletedWordMapper
from lingocards.infrastructure.learning.schemas import DeletedWordRecord
from lingocards.infrastructure.storage.records import dump_list, load_list, unreadable_entries
from lingocards.infrastructure.storage.unit_of_work import StoreUnitOfWork


class DeletedWordRepository:
    def __init__(self, store: StoreUnitOfWork) -> None:
        self.store = store
        self.mapper = DeletedWordMapper()

    def find_all(self, partition: Partition) -> list[DeletedWord]:
        key = StorageKey.scoped(Namespace.DELETED_WORDS, partition)
        return load_list(self.store.read(key), DeletedWordRecord, self.mapper.to_domain, key)

    def save_all(self, partition: Partition, words: list[DeletedWord]) -> bool:
        key = StorageKey.scoped(Namespace.DELETED_WORDS, partition)
        records = dump_list(self.mapper.to_record(word) for word in words)
        records.extend(
            unreadable_entries(
                self.store.read_for_update(key), DeletedWordRecord, self.mapper.to_domain, key
            )
        )
        return self.store.write(key, records)

    def clear(self, partition: Partition) -> bool:
        return self.store.delete(StorageKey.scoped(Namespace.DELETED_WORDS, partition))
