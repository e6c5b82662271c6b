from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from starlette import status

from vocabdeck.application.learning.protocols.card_extraction_service import SourceFile
from vocabdeck.application.learning.use_cases.add_manual_card_use_case import (
    AddManualCardUseCase,
)
from vocabdeck.application.learning.use_cases.get_cards_use_case import GetCardsUseCase
from vocabdeck.application.learning.use_cases.ingest_extracted_cards_use_case import (
    IngestExtractedCardsUseCase,
)
from vocabdeck.core import container
from vocabdeck.domain.common import DomainError
from vocabdeck.domain.learning.value_objects import Language
from vocabdeck.exceptions import VocabdeckError
from vocabdeck.infrastructure.common.di import inject_use_case
from vocabdeck.infrastructure.learning.mappers import CardMapper
from vocabdeck.infrastructure.learning.schemas import (
    CardCreateResponse,
    CardExtractionResponse,
    CardListResponse,
    ManualCardCreateRequest,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/cards", tags=["cards"])

mapper = CardMapper()


@router.get("", response_model=CardListResponse, status_code=status.HTTP_200_OK)
def list_cards(
    lesson_id: Annotated[str | None, Query(min_length=1)] = None,
    language: Language | None = None,
    use_case: GetCardsUseCase = Depends(inject_use_case(container.get_cards_use_case)),
) -> CardListResponse:
    """
    List stored cards in collection order.

    Args:
        lesson_id: Only cards filed under this lesson
        language: Only cards of this language
    """
    cards = use_case.list_cards(lesson_id=lesson_id, language=language)
    return CardListResponse(cards=[mapper.to_record(card) for card in cards], total=len(cards))


@router.post("", response_model=CardCreateResponse, status_code=status.HTTP_201_CREATED)
def create_card(
    request: ManualCardCreateRequest,
    use_case: AddManualCardUseCase = Depends(
        inject_use_case(container.add_manual_card_use_case)
    ),
) -> CardCreateResponse:
    """
    Add a manually entered card.

    A card with the same word and class as an existing one is merged into
    that card instead of being added twice.

    Raises:
        HTTPException: If the destination is not found or creation fails
    """
    try:
        result = use_case.add_card(mapper.to_draft(request))
        return CardCreateResponse(
            success=True,
            message="Card created successfully" if result.inserted else "Card merged into existing entry",
            inserted=result.inserted,
            card=mapper.to_record(result.card),
        )
    except (VocabdeckError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_create_card", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("/extract", response_model=CardExtractionResponse, status_code=status.HTTP_200_OK)
async def extract_cards(
    files: Annotated[list[UploadFile], File(description="Images or PDFs to extract from")],
    language: Annotated[Language, Form()],
    unit_id: Annotated[str, Form(min_length=1)],
    lesson_id: Annotated[str, Form(min_length=1)],
    use_case: IngestExtractedCardsUseCase = Depends(
        inject_use_case(container.ingest_extracted_cards_use_case)
    ),
) -> CardExtractionResponse:
    """
    Extract cards from uploaded files and merge them into the collection.

    Nothing is merged when extraction fails.

    Raises:
        HTTPException: If the destination is not found (404) or extraction fails (502)
    """
    try:
        source_files = [
            SourceFile(
                filename=upload.filename or "upload",
                content_type=upload.content_type,
                content=await upload.read(),
            )
            for upload in files
        ]
        result = await use_case.ingest(source_files, language, unit_id, lesson_id)
        return CardExtractionResponse(
            success=True,
            message=f"Extracted {result.extracted} cards",
            extracted_count=result.extracted,
            inserted_count=result.inserted,
            enriched_count=result.enriched,
        )
    except (VocabdeckError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_extract_cards", lesson_id=lesson_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
