from dependency_injector import containers, providers

from vocabdeck.application.learning.services.card_store import CardStore
from vocabdeck.application.learning.use_cases.add_manual_card_use_case import (
    AddManualCardUseCase,
)
from vocabdeck.application.learning.use_cases.get_cards_use_case import GetCardsUseCase
from vocabdeck.application.learning.use_cases.ingest_extracted_cards_use_case import (
    IngestExtractedCardsUseCase,
)
from vocabdeck.application.learning.use_cases.training_setup_use_case import (
    TrainingSetupUseCase,
)
from vocabdeck.application.learning.use_cases.unit_management_use_case import (
    UnitManagementUseCase,
)
from vocabdeck.config import get_settings
from vocabdeck.domain.learning.services.card_reconciliation_service import (
    CardReconciliationService,
)
from vocabdeck.domain.learning.services.eligibility_counting_service import (
    EligibilityCountingService,
)
from vocabdeck.infrastructure.learning.repositories import (
    InMemoryUnitRepository,
    create_card_repository,
)
from vocabdeck.infrastructure.learning.services import SimulatedCardExtractionService


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)

    # Repositories
    card_repository = providers.Singleton(create_card_repository, settings=settings)
    unit_repository = providers.Singleton(
        InMemoryUnitRepository,
        seed_defaults=settings.provided.SEED_DEFAULT_UNITS,
    )

    # Domain services (pure domain logic)
    card_reconciliation_service = providers.Factory(CardReconciliationService)
    eligibility_counting_service = providers.Factory(EligibilityCountingService)

    # The one owner of the card collection
    card_store = providers.Singleton(
        CardStore,
        repository=card_repository,
        reconciler=card_reconciliation_service,
        counter=eligibility_counting_service,
    )

    # External collaborators
    card_extraction_service = providers.Singleton(
        SimulatedCardExtractionService,
        delay_seconds=settings.provided.EXTRACTION_DELAY_SECONDS,
    )

    # Learning module, application use cases
    get_cards_use_case = providers.Factory(GetCardsUseCase, card_store=card_store)

    add_manual_card_use_case = providers.Factory(
        AddManualCardUseCase,
        card_store=card_store,
        unit_repository=unit_repository,
    )

    ingest_extracted_cards_use_case = providers.Factory(
        IngestExtractedCardsUseCase,
        card_store=card_store,
        extraction_service=card_extraction_service,
        unit_repository=unit_repository,
    )

    training_setup_use_case = providers.Factory(
        TrainingSetupUseCase,
        card_store=card_store,
        default_card_limit=settings.provided.DEFAULT_CARD_LIMIT,
        min_card_limit=settings.provided.MIN_CARD_LIMIT,
    )

    unit_management_use_case = providers.Factory(
        UnitManagementUseCase,
        unit_repository=unit_repository,
        card_store=card_store,
    )


container = Container()
