import structlog
from fastapi import APIRouter, Depends
from starlette import status

from vocabdeck.application.learning.use_cases.training_setup_use_case import (
    TrainingSetupUseCase,
)
from vocabdeck.core import container
from vocabdeck.infrastructure.common.di import inject_use_case
from vocabdeck.infrastructure.learning.schemas import (
    TrainingCountsResponse,
    TrainingScopeRequest,
    TrainingSessionRequest,
    TrainingSessionResponse,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/training", tags=["training"])


@router.post("/counts", response_model=TrainingCountsResponse, status_code=status.HTTP_200_OK)
def get_training_counts(
    request: TrainingScopeRequest,
    use_case: TrainingSetupUseCase = Depends(inject_use_case(container.training_setup_use_case)),
) -> TrainingCountsResponse:
    """
    Count eligible cards per question type for a lesson/class selection.

    Only the question types of the requested language are returned.
    Clients drop selected types whose count is zero.
    """
    counts = use_case.preview_counts(request.language, request.lesson_ids, request.card_classes)
    return TrainingCountsResponse(counts=counts)


@router.post(
    "/sessions", response_model=TrainingSessionResponse, status_code=status.HTTP_201_CREATED
)
def configure_training_session(
    request: TrainingSessionRequest,
    use_case: TrainingSetupUseCase = Depends(inject_use_case(container.training_setup_use_case)),
) -> TrainingSessionResponse:
    """
    Validate a training session configuration.

    Question types without eligible cards are dropped and reported; the card
    limit is clamped to what is available.

    Raises:
        HTTPException: 400 if no requested question type has eligible cards
    """
    plan = use_case.configure_session(
        language=request.language,
        lesson_ids=request.lesson_ids,
        card_classes=request.card_classes,
        question_types=request.question_types,
        card_limit=request.card_limit,
    )
    return TrainingSessionResponse(
        language=plan.language,
        lesson_ids=plan.lesson_ids,
        card_classes=plan.card_classes,
        question_types=plan.question_types,
        card_limit=plan.card_limit,
        counts=plan.counts,
        dropped_question_types=plan.dropped_question_types,
        max_cards_available=plan.max_cards_available,
    )
