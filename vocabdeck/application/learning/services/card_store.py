"""Application service owning the canonical card collection."""

import threading
from collections.abc import Iterable, Sequence

import structlog

from vocabdeck.application.learning.protocols.card_repository import CardRepositoryProtocol
from vocabdeck.domain.common.value_objects import LessonId
from vocabdeck.domain.learning.entities.card import Card
from vocabdeck.domain.learning.services.card_reconciliation_service import (
    CardReconciliationService,
    ReconciliationResult,
)
from vocabdeck.domain.learning.services.eligibility_counting_service import (
    EligibilityCountingService,
)
from vocabdeck.domain.learning.value_objects import Language, QuestionType, TrainingScope

logger = structlog.get_logger(__name__)


class CardStore:
    """
    Single owner of the card collection.

    Callers get immutable snapshots and go through ``merge`` to change the
    collection. Merges are serialized; reads work on whichever snapshot was
    current when they started.
    """

    def __init__(
        self,
        repository: CardRepositoryProtocol,
        reconciler: CardReconciliationService,
        counter: EligibilityCountingService,
    ) -> None:
        """Initialize store with its persistence and domain services."""
        self.repository = repository
        self.reconciler = reconciler
        self.counter = counter
        self._cards: tuple[Card, ...] | None = None
        self._write_lock = threading.Lock()

    def snapshot(self) -> tuple[Card, ...]:
        """Return the current collection, loading it on first access."""
        cards = self._cards
        if cards is None:
            with self._write_lock:
                if self._cards is None:
                    self._cards = tuple(self.repository.load())
                    logger.info("card_collection_loaded", card_count=len(self._cards))
                cards = self._cards
        return cards

    def merge(self, batch: Sequence[Card]) -> ReconciliationResult:
        """
        Merge a complete batch of new cards into the collection.

        The new state is persisted before it becomes visible. If saving
        fails the previous snapshot stays current and the error propagates.

        Args:
            batch: New cards (extraction output or a single manual entry)

        Returns:
            ReconciliationResult describing the new collection
        """
        current = self.snapshot()
        if not batch:
            return ReconciliationResult(cards=list(current))

        with self._write_lock:
            current = self._cards if self._cards is not None else current
            result = self.reconciler.merge(current, batch)
            self.repository.save(result.cards)
            self._cards = tuple(result.cards)

        logger.info(
            "cards_merged",
            batch_size=len(batch),
            inserted=result.inserted,
            enriched=result.enriched,
            matched=result.matched,
            card_count=len(result.cards),
        )
        return result

    def query(self, scope: TrainingScope, language: Language) -> dict[QuestionType, int]:
        """Count eligible cards per question type for a scope."""
        return self.counter.count(self.snapshot(), scope, language)

    def eligible_cards(self, scope: TrainingScope, question_type: QuestionType) -> list[Card]:
        """Return the cards a session may ask as ``question_type``."""
        return self.counter.eligible_cards(self.snapshot(), scope, question_type)

    def cards_in_lesson(self, lesson_id: LessonId) -> list[Card]:
        return [card for card in self.snapshot() if card.lesson_id == lesson_id]

    def count_orphans(self, lesson_ids: Iterable[LessonId]) -> int:
        """Count cards whose home lesson is among ``lesson_ids``."""
        lessons = set(lesson_ids)
        return sum(1 for card in self.snapshot() if card.lesson_id in lessons)
