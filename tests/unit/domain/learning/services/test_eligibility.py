"""Tests for card eligibility rules."""

from vocabdeck.domain.learning.services.eligibility import is_card_eligible
from vocabdeck.domain.learning.value_objects import (
    CardClass,
    Conjugations,
    Gender,
    Language,
    QuestionType,
)
from tests.conftest import PARLER_FORMS, create_test_card, create_test_noun, create_test_verb


class TestMeaning:
    def test_word_and_translation_required(self) -> None:
        assert is_card_eligible(create_test_card(), QuestionType.MEANING)
        assert not is_card_eligible(create_test_card(translation="  "), QuestionType.MEANING)
        assert not is_card_eligible(create_test_card(word=""), QuestionType.MEANING)

    def test_whitespace_only_fields_do_not_count(self) -> None:
        assert not is_card_eligible(create_test_card(translation=" \t "), QuestionType.MEANING)
        assert not is_card_eligible(create_test_card(word="   "), QuestionType.MEANING)


class TestGender:
    def test_noun_with_gender(self) -> None:
        assert is_card_eligible(create_test_noun(gender=Gender.MASC), QuestionType.GENDER)
        assert is_card_eligible(create_test_noun(gender=Gender.FEM), QuestionType.GENDER)

    def test_noun_without_gender_is_never_eligible(self) -> None:
        assert not is_card_eligible(create_test_noun(gender=Gender.NONE), QuestionType.GENDER)

    def test_gendered_adjective_is_not_eligible(self) -> None:
        card = create_test_card(word="grand", card_class=CardClass.ADJECTIVE, gender=Gender.MASC)
        assert not is_card_eligible(card, QuestionType.GENDER)


class TestConjugation:
    def test_complete_verb(self) -> None:
        assert is_card_eligible(create_test_verb(forms=PARLER_FORMS), QuestionType.CONJUGATION)

    def test_one_unknown_slot_excludes_verb(self) -> None:
        forms = ["parle", "parles", "parle", "parlons", None, "parlent"]
        assert not is_card_eligible(create_test_verb(forms=forms), QuestionType.CONJUGATION)

    def test_legacy_unknown_marker_excludes_verb(self) -> None:
        forms = ["parle", "parles", "???", "parlons", "parlez", "parlent"]
        assert not is_card_eligible(create_test_verb(forms=forms), QuestionType.CONJUGATION)

    def test_verb_without_conjugations(self) -> None:
        assert not is_card_eligible(create_test_verb(forms=None), QuestionType.CONJUGATION)

    def test_verb_without_infinitive(self) -> None:
        card = create_test_verb(forms=PARLER_FORMS)
        card.infinitive = None
        assert not is_card_eligible(card, QuestionType.CONJUGATION)

    def test_conjugated_non_verb_is_not_eligible(self) -> None:
        card = create_test_card(
            word="parler",
            card_class=CardClass.NOUN,
            infinitive="parler",
            conjugations=Conjugations.from_slots(PARLER_FORMS),
        )
        assert not is_card_eligible(card, QuestionType.CONJUGATION)


class TestSynonymsAndAntonyms:
    def test_non_empty_sets_required(self) -> None:
        card = create_test_card(
            word="Happy",
            card_class=CardClass.ADJECTIVE,
            language=Language.ENGLISH,
            synonyms=frozenset({"Joyful"}),
            antonyms=frozenset(),
        )
        assert is_card_eligible(card, QuestionType.SYNONYMS)
        assert not is_card_eligible(card, QuestionType.ANTONYMS)

    def test_missing_sets(self) -> None:
        card = create_test_card(word="Run", language=Language.ENGLISH)
        assert not is_card_eligible(card, QuestionType.SYNONYMS)
        assert not is_card_eligible(card, QuestionType.ANTONYMS)


def test_unknown_question_type_is_not_eligible() -> None:
    assert not is_card_eligible(create_test_card(), "Spelling")
