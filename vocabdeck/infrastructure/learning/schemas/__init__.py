from .card_schemas import (
    CardCreateResponse,
    CardExtractionResponse,
    CardListResponse,
    CardRecord,
    ManualCardCreateRequest,
)
from .training_schemas import (
    TrainingCountsResponse,
    TrainingScopeRequest,
    TrainingSessionRequest,
    TrainingSessionResponse,
)
from .unit_schemas import LessonResponse, NameRequest, UnitListResponse, UnitResponse

__all__ = [
    "CardCreateResponse",
    "CardExtractionResponse",
    "CardListResponse",
    "CardRecord",
    "LessonResponse",
    "ManualCardCreateRequest",
    "NameRequest",
    "TrainingCountsResponse",
    "TrainingScopeRequest",
    "TrainingSessionRequest",
    "TrainingSessionResponse",
    "UnitListResponse",
    "UnitResponse",
]
