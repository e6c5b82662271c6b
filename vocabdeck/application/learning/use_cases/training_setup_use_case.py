"""Use case for previewing and configuring a training session."""

from collections.abc import Sequence

import structlog

from vocabdeck.application.learning.services.card_store import CardStore
from vocabdeck.application.learning.use_cases.dtos import TrainingPlan
from vocabdeck.application.learning.use_cases.exceptions import NoEligibleQuestionTypesError
from vocabdeck.domain.learning.services.eligibility_counting_service import (
    EligibilityCountingService,
)
from vocabdeck.domain.learning.value_objects import (
    CardClass,
    Language,
    QuestionType,
    TrainingScope,
)

logger = structlog.get_logger(__name__)


class TrainingSetupUseCase:
    """Use case backing the training setup screen."""

    def __init__(
        self,
        card_store: CardStore,
        default_card_limit: int = 20,
        min_card_limit: int = 5,
    ) -> None:
        """Initialize use case with the store and the card limit bounds."""
        self.card_store = card_store
        self.default_card_limit = default_card_limit
        self.min_card_limit = min_card_limit

    def preview_counts(
        self,
        language: Language,
        lesson_ids: Sequence[str],
        card_classes: Sequence[CardClass] = (),
    ) -> dict[QuestionType, int]:
        """
        Count eligible cards per question type for a filter selection.

        An empty lesson selection counts nothing; an empty class selection
        means all classes.
        """
        scope = TrainingScope.of(lesson_ids, card_classes)
        return self.card_store.query(scope, language)

    def configure_session(
        self,
        language: Language,
        lesson_ids: Sequence[str],
        card_classes: Sequence[CardClass],
        question_types: Sequence[QuestionType],
        card_limit: int | None = None,
    ) -> TrainingPlan:
        """
        Validate a session configuration against the current collection.

        Question types without eligible cards are dropped from the selection.
        The card limit is clamped between the minimum and the largest count
        among the kept question types.

        Raises:
            NoEligibleQuestionTypesError: If no requested type has eligible cards
        """
        counts = self.preview_counts(language, lesson_ids, card_classes)
        retained = EligibilityCountingService.retain_available(question_types, counts)
        dropped = [t for t in dict.fromkeys(question_types) if t not in retained]

        if not retained:
            logger.info(
                "training_session_rejected",
                language=language.value,
                lesson_count=len(lesson_ids),
                requested=[t.value for t in question_types],
            )
            raise NoEligibleQuestionTypesError()

        max_cards_available = max(counts[t] for t in retained)
        upper_bound = max(self.min_card_limit, max_cards_available)
        requested_limit = self.default_card_limit if card_limit is None else card_limit
        limit = min(max(requested_limit, self.min_card_limit), upper_bound)

        logger.info(
            "training_session_configured",
            language=language.value,
            question_types=[t.value for t in retained],
            dropped=[t.value for t in dropped],
            card_limit=limit,
        )
        return TrainingPlan(
            language=language,
            lesson_ids=list(dict.fromkeys(lesson_ids)),
            card_classes=list(dict.fromkeys(card_classes)),
            question_types=retained,
            card_limit=limit,
            counts=counts,
            dropped_question_types=dropped,
            max_cards_available=max_cards_available,
        )
