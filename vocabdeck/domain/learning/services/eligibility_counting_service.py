"""Domain service counting the cards eligible for each question type."""

from collections.abc import Iterable, Mapping

from vocabdeck.domain.learning.entities.card import Card
from vocabdeck.domain.learning.services.eligibility import is_card_eligible
from vocabdeck.domain.learning.value_objects import (
    Language,
    QuestionType,
    TrainingScope,
    question_types_for,
)


class EligibilityCountingService:
    """
    Stateless domain service for training previews.

    Counts are recomputed on every call; nothing is cached between calls.
    """

    def count(
        self,
        cards: Iterable[Card],
        scope: TrainingScope,
        language: Language,
    ) -> dict[QuestionType, int]:
        """
        Count in-scope cards eligible for each question type of a language.

        Args:
            cards: The card collection
            scope: Lesson/class filter
            language: Active language, selects which question types are counted

        Returns:
            Mapping covering exactly the language's question types
        """
        question_types = question_types_for(language)
        counts = dict.fromkeys(question_types, 0)

        if scope.is_empty:
            return counts

        for card in cards:
            if not scope.includes(card):
                continue
            for question_type in question_types:
                if is_card_eligible(card, question_type):
                    counts[question_type] += 1

        return counts

    def eligible_cards(
        self,
        cards: Iterable[Card],
        scope: TrainingScope,
        question_type: QuestionType,
    ) -> list[Card]:
        """Return the in-scope cards that can be asked as ``question_type``."""
        return [
            card
            for card in cards
            if scope.includes(card) and is_card_eligible(card, question_type)
        ]

    @staticmethod
    def retain_available(
        selected: Iterable[QuestionType],
        counts: Mapping[QuestionType, int],
    ) -> list[QuestionType]:
        """
        Drop selected question types that no longer have eligible cards.

        Callers apply this after every recompute so a selection never
        references a zero-count type. Order is kept, duplicates are removed.
        """
        retained: list[QuestionType] = []
        for question_type in selected:
            if counts.get(question_type, 0) > 0 and question_type not in retained:
                retained.append(question_type)
        return retained
