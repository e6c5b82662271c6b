"""Use case for turning uploaded source files into cards."""

from collections.abc import Sequence

import structlog

from vocabdeck.application.learning.protocols.card_extraction_service import (
    CardExtractionServiceProtocol,
    SourceFile,
)
from vocabdeck.application.learning.protocols.unit_repository import UnitRepositoryProtocol
from vocabdeck.application.learning.services.card_store import CardStore
from vocabdeck.application.learning.use_cases.destination import resolve_destination
from vocabdeck.application.learning.use_cases.dtos import IngestResult
from vocabdeck.application.learning.use_cases.exceptions import NoSourceFilesError
from vocabdeck.domain.learning.value_objects import Language
from vocabdeck.exceptions import CardExtractionError

logger = structlog.get_logger(__name__)


class IngestExtractedCardsUseCase:
    """Use case for extracting cards from files and merging them into the store."""

    def __init__(
        self,
        card_store: CardStore,
        extraction_service: CardExtractionServiceProtocol,
        unit_repository: UnitRepositoryProtocol,
    ) -> None:
        """Initialize use case with the store and its collaborators."""
        self.card_store = card_store
        self.extraction_service = extraction_service
        self.unit_repository = unit_repository

    async def ingest(
        self,
        files: Sequence[SourceFile],
        language: Language,
        unit_id: str,
        lesson_id: str,
    ) -> IngestResult:
        """
        Extract cards from source files and merge the whole batch.

        Args:
            files: Uploaded source files
            language: Language of the material
            unit_id: Destination unit
            lesson_id: Destination lesson, must belong to the unit

        Returns:
            IngestResult with extracted, inserted and enriched counts

        Raises:
            NoSourceFilesError: If no file was given
            UnitNotFoundError: If the unit does not exist
            LessonNotFoundError: If the lesson is not part of the unit
            CardExtractionError: If extraction fails; nothing is merged then
        """
        if not files:
            raise NoSourceFilesError()

        unit, lesson = resolve_destination(self.unit_repository, unit_id, lesson_id)

        try:
            extracted = await self.extraction_service.extract_cards(
                files, language, unit.id, lesson.id
            )
        except Exception as e:
            logger.error(
                "card_extraction_failed",
                lesson_id=lesson_id,
                file_count=len(files),
                error=str(e),
                exc_info=True,
            )
            raise CardExtractionError(str(e) or e.__class__.__name__) from e

        result = self.card_store.merge(extracted)

        logger.info(
            "extracted_cards_ingested",
            lesson_id=lesson_id,
            language=language.value,
            extracted=len(extracted),
            inserted=result.inserted,
            enriched=result.enriched,
        )
        return IngestResult(
            extracted=len(extracted),
            inserted=result.inserted,
            enriched=result.enriched,
        )
