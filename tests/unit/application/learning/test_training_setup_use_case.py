"""Tests for TrainingSetupUseCase."""

import pytest

from vocabdeck.application.learning.services.card_store import CardStore
from vocabdeck.application.learning.use_cases.exceptions import NoEligibleQuestionTypesError
from vocabdeck.application.learning.use_cases.training_setup_use_case import (
    TrainingSetupUseCase,
)
from vocabdeck.domain.learning.entities.card import Card
from vocabdeck.domain.learning.services.card_reconciliation_service import (
    CardReconciliationService,
)
from vocabdeck.domain.learning.services.eligibility_counting_service import (
    EligibilityCountingService,
)
from vocabdeck.domain.learning.value_objects import CardClass, Gender, Language, QuestionType
from vocabdeck.infrastructure.learning.repositories import InMemoryCardRepository
from tests.conftest import (
    GREETINGS_LESSON_ID,
    PARLER_FORMS,
    create_test_noun,
    create_test_verb,
)


def _use_case(cards: list[Card]) -> TrainingSetupUseCase:
    store = CardStore(
        InMemoryCardRepository(cards), CardReconciliationService(), EligibilityCountingService()
    )
    return TrainingSetupUseCase(store, default_card_limit=20, min_card_limit=5)


def _nouns(count: int, gender: Gender = Gender.MASC) -> list[Card]:
    return [create_test_noun(f"mot{i}", gender) for i in range(count)]


class TestPreviewCounts:
    def test_no_lessons_selected(self) -> None:
        use_case = _use_case(_nouns(3))
        counts = use_case.preview_counts(Language.FRENCH, [])
        assert counts == {
            QuestionType.MEANING: 0,
            QuestionType.GENDER: 0,
            QuestionType.CONJUGATION: 0,
        }

    def test_counts_follow_class_filter(self) -> None:
        use_case = _use_case(_nouns(3) + [create_test_verb("parler", forms=PARLER_FORMS)])

        counts = use_case.preview_counts(Language.FRENCH, [GREETINGS_LESSON_ID], [CardClass.VERB])

        assert counts[QuestionType.MEANING] == 1
        assert counts[QuestionType.CONJUGATION] == 1
        assert counts[QuestionType.GENDER] == 0


class TestConfigureSession:
    def test_drops_types_without_cards(self) -> None:
        use_case = _use_case(_nouns(3))

        plan = use_case.configure_session(
            language=Language.FRENCH,
            lesson_ids=[GREETINGS_LESSON_ID],
            card_classes=[],
            question_types=[QuestionType.CONJUGATION, QuestionType.GENDER],
        )

        assert plan.question_types == [QuestionType.GENDER]
        assert plan.dropped_question_types == [QuestionType.CONJUGATION]
        assert plan.max_cards_available == 3

    def test_rejects_when_nothing_is_eligible(self) -> None:
        use_case = _use_case(_nouns(3, Gender.NONE))

        with pytest.raises(NoEligibleQuestionTypesError) as exc_info:
            use_case.configure_session(
                language=Language.FRENCH,
                lesson_ids=[GREETINGS_LESSON_ID],
                card_classes=[],
                question_types=[QuestionType.GENDER],
            )
        assert exc_info.value.status_code == 400

    def test_question_type_of_other_language_is_dropped(self) -> None:
        use_case = _use_case(_nouns(3))

        plan = use_case.configure_session(
            language=Language.FRENCH,
            lesson_ids=[GREETINGS_LESSON_ID],
            card_classes=[],
            question_types=[QuestionType.SYNONYMS, QuestionType.MEANING],
        )

        assert plan.question_types == [QuestionType.MEANING]
        assert plan.dropped_question_types == [QuestionType.SYNONYMS]

    def test_default_limit_is_clamped_to_available(self) -> None:
        use_case = _use_case(_nouns(8))

        plan = use_case.configure_session(
            language=Language.FRENCH,
            lesson_ids=[GREETINGS_LESSON_ID],
            card_classes=[],
            question_types=[QuestionType.MEANING],
        )

        assert plan.card_limit == 8

    def test_limit_never_below_minimum(self) -> None:
        use_case = _use_case(_nouns(2))

        plan = use_case.configure_session(
            language=Language.FRENCH,
            lesson_ids=[GREETINGS_LESSON_ID],
            card_classes=[],
            question_types=[QuestionType.MEANING],
            card_limit=1,
        )

        assert plan.card_limit == 5
        assert plan.max_cards_available == 2

    def test_requested_limit_within_bounds_is_kept(self) -> None:
        use_case = _use_case(_nouns(30))

        plan = use_case.configure_session(
            language=Language.FRENCH,
            lesson_ids=[GREETINGS_LESSON_ID],
            card_classes=[],
            question_types=[QuestionType.MEANING],
            card_limit=12,
        )

        assert plan.card_limit == 12
        assert plan.counts[QuestionType.MEANING] == 30
