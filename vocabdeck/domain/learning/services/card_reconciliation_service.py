"""
Domain service for merging new cards into a card collection.

This is a pure domain service with no infrastructure dependencies.
"""

from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any

from vocabdeck.domain.learning.entities.card import Card
from vocabdeck.domain.learning.value_objects import CardClass, IdentityKey


@dataclass(frozen=True)
class ReconciliationResult:
    """Outcome of merging a batch into a collection."""

    cards: list[Card]
    inserted: int = 0
    enriched: int = 0
    matched: int = 0


class CardReconciliationService:
    """
    Domain service for folding new cards into an existing collection.

    Deduplication is based on the identity key - a card with the same
    lower-cased word and class as an existing one is the same entry.
    Matched entries are enriched with data they are missing, never
    replaced, so merging the same batch twice changes nothing the
    second time.
    """

    def merge(self, existing: Sequence[Card], batch: Sequence[Card]) -> ReconciliationResult:
        """
        Merge a batch of new cards into a collection.

        Args:
            existing: Current collection, in display order
            batch: New cards, in the order they were produced

        Returns:
            ReconciliationResult with the new collection. Untouched cards are
            the same objects as in ``existing``; neither input is modified.
        """
        merged: list[Card] = list(existing)

        # First position of each key; the batch's own cards are added as we go
        positions: dict[IdentityKey, int] = {}
        for position, card in enumerate(merged):
            positions.setdefault(card.identity_key, position)

        inserted = 0
        enriched = 0
        matched = 0

        for new_card in batch:
            key = new_card.identity_key
            position = positions.get(key)

            if position is None:
                positions[key] = len(merged)
                merged.append(new_card)
                inserted += 1
                continue

            matched += 1
            current = merged[position]
            updated = self.enrich(current, new_card)
            if updated is not current:
                merged[position] = updated
                enriched += 1

        return ReconciliationResult(
            cards=merged,
            inserted=inserted,
            enriched=enriched,
            matched=matched,
        )

    @staticmethod
    def enrich(existing: Card, new_card: Card) -> Card:
        """
        Fill in data the existing card lacks from a matching new card.

        Only conjugation data (when the existing card has none) and synonyms
        are taken over. Id, unit, lesson and creation time always stay.

        Returns:
            The existing card itself when nothing changed, otherwise an
            enriched copy
        """
        changes: dict[str, Any] = {}

        if (
            new_card.card_class == CardClass.VERB
            and new_card.has_conjugations
            and not existing.has_conjugations
        ):
            changes["infinitive"] = new_card.infinitive or existing.infinitive
            changes["conjugations"] = new_card.conjugations
            changes["verb_type"] = new_card.verb_type or existing.verb_type

        if new_card.synonyms:
            synonyms = (existing.synonyms or frozenset()) | new_card.synonyms
            if synonyms != existing.synonyms:
                changes["synonyms"] = synonyms

        if not changes:
            return existing
        return replace(existing, **changes)
