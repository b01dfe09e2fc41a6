from dependency_injector import containers, providers

from lingocards.application.history.use_cases.language_pair_use_case import LanguagePairUseCase
from lingocards.application.history.use_cases.prompt_history_use_case import (
    PromptHistoryUseCase,
)
from lingocards.application.learning.use_cases.avoidance_use_case import AvoidanceUseCase
from lingocards.application.learning.use_cases.card_generation_use_case import (
    CardGenerationUseCase,
)
from lingocards.application.learning.use_cases.deck_use_case import DeckUseCase
from lingocards.application.learning.use_cases.flashcard_use_case import FlashcardUseCase
from lingocards.application.learning.use_cases.review_use_case import ReviewUseCase
from lingocards.application.ports.partition_store import PartitionStoreProtocol
from lingocards.application.settings.use_cases.settings_use_case import SettingsUseCase
from lingocards.config import Settings, get_settings
from lingocards.database import create_tables, get_session_factory, initialize_database
from lingocards.domain.common.clock import now_millis
from lingocards.domain.learning.services.review_scheduler import ReviewScheduler
from lingocards.infrastructure.ai.ai_service import AICardGenerator
from lingocards.infrastructure.history.repositories import HistoryRepository
from lingocards.infrastructure.learning.repositories import (
    DeckRepository,
    DeletedWordRepository,
    FlashcardRepository,
)
from lingocards.infrastructure.settings.repositories import SettingsRepository
from lingocards.infrastructure.storage.in_memory_store import InMemoryPartitionStore
from lingocards.infrastructure.storage.sqlalchemy_store import SqlAlchemyPartitionStore
from lingocards.infrastructure.storage.unit_of_work import StoreUnitOfWork


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare the store as a dependency that will be provided at runtime
    partition_store = providers.Dependency()
    clock = providers.Object(now_millis)

    # One unit of work shared by every repository, so a transaction spans all of them
    unit_of_work = providers.Singleton(StoreUnitOfWork, store=partition_store)

    # Repositories
    deck_repository = providers.Factory(DeckRepository, store=unit_of_work)
    flashcard_repository = providers.Factory(FlashcardRepository, store=unit_of_work)
    deleted_word_repository = providers.Factory(DeletedWordRepository, store=unit_of_work)
    history_repository = providers.Factory(HistoryRepository, store=unit_of_work)
    settings_repository = providers.Factory(SettingsRepository, store=unit_of_work)

    # Domain services (pure domain logic, no storage)
    review_scheduler = providers.Factory(ReviewScheduler)

    # Settings and history use cases
    settings_use_case = providers.Factory(
        SettingsUseCase,
        settings_repository=settings_repository,
    )
    prompt_history_use_case = providers.Factory(
        PromptHistoryUseCase,
        history_repository=history_repository,
        unit_of_work=unit_of_work,
        clock=clock,
    )
    language_pair_use_case = providers.Factory(
        LanguagePairUseCase,
        history_repository=history_repository,
        deck_repository=deck_repository,
        flashcard_repository=flashcard_repository,
        unit_of_work=unit_of_work,
    )

    # Learning module use cases
    deck_use_case = providers.Factory(
        DeckUseCase,
        deck_repository=deck_repository,
        flashcard_repository=flashcard_repository,
        unit_of_work=unit_of_work,
        clock=clock,
    )
    flashcard_use_case = providers.Factory(
        FlashcardUseCase,
        flashcard_repository=flashcard_repository,
        deck_repository=deck_repository,
        deleted_word_repository=deleted_word_repository,
        unit_of_work=unit_of_work,
        clock=clock,
    )
    avoidance_use_case = providers.Factory(
        AvoidanceUseCase,
        flashcard_repository=flashcard_repository,
        deleted_word_repository=deleted_word_repository,
    )
    review_use_case = providers.Factory(
        ReviewUseCase,
        flashcard_use_case=flashcard_use_case,
        settings_use_case=settings_use_case,
        scheduler=review_scheduler,
        clock=clock,
    )

    card_generator = providers.Factory(AICardGenerator, settings_use_case=settings_use_case)
    card_generation_use_case = providers.Factory(
        CardGenerationUseCase,
        card_generator=card_generator,
        avoidance_use_case=avoidance_use_case,
        prompt_history_use_case=prompt_history_use_case,
        language_pair_use_case=language_pair_use_case,
        flashcard_use_case=flashcard_use_case,
    )


def build_partition_store(settings: Settings) -> PartitionStoreProtocol:
    """Create the store backend selected by STORAGE_BACKEND."""
    if settings.STORAGE_BACKEND == "memory":
        return InMemoryPartitionStore()

    initialize_database(settings)
    create_tables()
    return SqlAlchemyPartitionStore(get_session_factory(settings))


def create_container(
    settings: Settings | None = None, store: PartitionStoreProtocol | None = None
) -> Container:
    """Build a container bound to a store (by default the one the settings select)."""
    container = Container()
    if store is None:
        store = build_partition_store(settings or get_settings())
    container.partition_store.override(store)
    return container
