"""Tests for CardReconciliationService domain service."""

from collections import Counter
from typing import Any

from vocabdeck.domain.learning.services.card_reconciliation_service import (
    CardReconciliationService,
)
from vocabdeck.domain.learning.entities.card import Card
from vocabdeck.domain.learning.value_objects import CardClass, Gender, Language, VerbType
from tests.conftest import (
    AIRPORT_LESSON_ID,
    PARLER_FORMS,
    create_test_card,
    create_test_noun,
    create_test_verb,
)


def _english_adjective(word: str = "Happy", **kwargs: Any) -> Card:
    return create_test_card(
        word=word, card_class=CardClass.ADJECTIVE, language=Language.ENGLISH, **kwargs
    )


class TestMerge:
    def test_appends_unmatched_cards_in_batch_order(self) -> None:
        service = CardReconciliationService()
        existing = [create_test_noun("table")]
        livre = create_test_noun("livre", Gender.MASC)
        manger = create_test_verb("manger")

        result = service.merge(existing, [livre, manger])

        assert [c.word for c in result.cards] == ["table", "livre", "manger"]
        assert result.cards[1] is livre
        assert result.inserted == 2
        assert result.matched == 0

    def test_inserted_card_keeps_its_id(self) -> None:
        service = CardReconciliationService()
        card = create_test_noun("livre")
        result = service.merge([], [card])
        assert result.cards[0].id == card.id

    def test_adopts_conjugations_into_bare_verb(self) -> None:
        service = CardReconciliationService()
        bare = create_test_verb("parler", forms=None)
        conjugated = create_test_verb("parler", forms=PARLER_FORMS, lesson_id=AIRPORT_LESSON_ID)

        result = service.merge([bare], [conjugated])

        assert len(result.cards) == 1
        merged = result.cards[0]
        assert merged.id == bare.id
        assert merged.unit_id == bare.unit_id
        assert merged.lesson_id == bare.lesson_id
        assert merged.created_at == bare.created_at
        assert merged.conjugations == conjugated.conjugations
        assert merged.verb_type == conjugated.verb_type
        assert result.enriched == 1
        assert result.inserted == 0

    def test_adopts_conjugations_when_existing_slots_are_all_empty(self) -> None:
        service = CardReconciliationService()
        empty = create_test_verb("parler", forms=[None] * 6)
        conjugated = create_test_verb("parler", forms=PARLER_FORMS)

        merged = service.merge([empty], [conjugated]).cards[0]

        assert merged.conjugations is not None
        assert merged.conjugations.is_complete

    def test_existing_conjugations_are_not_replaced(self) -> None:
        service = CardReconciliationService()
        partial = create_test_verb("parler", forms=["parle"])
        full = create_test_verb("parler", forms=PARLER_FORMS)

        result = service.merge([partial], [full])

        assert result.cards[0] is partial
        assert result.enriched == 0
        assert result.matched == 1

    def test_synonyms_are_unioned(self) -> None:
        service = CardReconciliationService()
        existing = _english_adjective(synonyms=frozenset({"Joyful"}))
        new = _english_adjective(
            word="happy", synonyms=frozenset({"Cheerful", "Joyful"}), antonyms=frozenset({"Sad"})
        )

        merged = service.merge([existing], [new]).cards[0]

        assert merged.synonyms == frozenset({"Joyful", "Cheerful"})
        # Antonyms are never taken over
        assert merged.antonyms is None
        assert merged.word == "Happy"

    def test_synonyms_union_is_case_sensitive(self) -> None:
        service = CardReconciliationService()
        existing = _english_adjective(synonyms=frozenset({"Joyful"}))
        new = _english_adjective(synonyms=frozenset({"joyful"}))

        merged = service.merge([existing], [new]).cards[0]

        assert merged.synonyms == frozenset({"Joyful", "joyful"})

    def test_other_fields_are_not_overwritten(self) -> None:
        service = CardReconciliationService()
        existing = create_test_noun("table", Gender.FEM)
        new = create_test_card(word="Table", translation="other", gender=Gender.MASC)

        result = service.merge([existing], [new])

        assert result.cards == [existing]
        assert result.cards[0] is existing

    def test_same_word_different_class_are_distinct(self) -> None:
        service = CardReconciliationService()
        noun = create_test_card(word="marche", card_class=CardClass.NOUN)
        verb = create_test_verb("marche")

        result = service.merge([noun], [verb])

        assert len(result.cards) == 2

    def test_duplicates_within_batch_collapse(self) -> None:
        service = CardReconciliationService()
        bare = create_test_verb("parler", forms=None)
        conjugated = create_test_verb("Parler", forms=PARLER_FORMS)

        result = service.merge([], [bare, conjugated])

        assert len(result.cards) == 1
        assert result.cards[0].id == bare.id
        assert result.cards[0].conjugations == conjugated.conjugations
        assert result.inserted == 1
        assert result.enriched == 1

    def test_inputs_are_not_mutated(self) -> None:
        service = CardReconciliationService()
        bare = create_test_verb("parler", forms=None)
        existing = [bare]
        batch = [create_test_verb("parler", forms=PARLER_FORMS), create_test_noun("livre")]

        service.merge(existing, batch)

        assert existing == [bare]
        assert bare.conjugations is None
        assert len(batch) == 2


class TestMergeProperties:
    def _batch(self) -> list[Card]:
        return [
            create_test_noun("table"),
            create_test_verb("parler", forms=PARLER_FORMS),
            _english_adjective(synonyms=frozenset({"Joyful"})),
        ]

    def test_idempotent_under_redelivery(self) -> None:
        service = CardReconciliationService()
        existing = [create_test_verb("parler", forms=None)]
        batch = self._batch()

        once = service.merge(existing, batch).cards
        twice = service.merge(once, batch)

        assert twice.cards == once
        assert twice.inserted == 0
        assert twice.enriched == 0

    def test_at_most_one_card_per_identity_key(self) -> None:
        service = CardReconciliationService()
        cards = service.merge([], self._batch() + self._batch()).cards
        counts = Counter(card.identity_key for card in cards)
        assert all(count == 1 for count in counts.values())

    def test_enrichment_never_loses_data(self) -> None:
        service = CardReconciliationService()
        existing = [
            create_test_verb("parler", forms=PARLER_FORMS),
            _english_adjective(synonyms=frozenset({"Glad"})),
        ]
        result = service.merge(existing, self._batch())

        for before, after in zip(existing, result.cards, strict=False):
            assert after.id == before.id
            assert after.lesson_id == before.lesson_id
            if before.conjugations is not None:
                assert after.conjugations == before.conjugations
            if before.synonyms:
                assert before.synonyms <= after.synonyms

    def test_adopting_conjugations_keeps_populated_verb_fields(self) -> None:
        service = CardReconciliationService()
        existing = create_test_verb("parler", forms=None, verb_type=VerbType.IRREGULAR)
        new = create_test_verb("parler", forms=PARLER_FORMS)
        new.verb_type = None
        new.infinitive = None

        merged = service.merge([existing], [new]).cards[0]

        assert merged.conjugations == new.conjugations
        assert merged.verb_type == VerbType.IRREGULAR
        assert merged.infinitive == "parler"
