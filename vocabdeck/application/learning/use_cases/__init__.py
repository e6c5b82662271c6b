from .add_manual_card_use_case import AddManualCardUseCase
from .get_cards_use_case import GetCardsUseCase
from .ingest_extracted_cards_use_case import IngestExtractedCardsUseCase
from .training_setup_use_case import TrainingSetupUseCase
from .unit_management_use_case import UnitManagementUseCase

__all__ = [
    "AddManualCardUseCase",
    "GetCardsUseCase",
    "IngestExtractedCardsUseCase",
    "TrainingSetupUseCase",
    "UnitManagementUseCase",
]
