"""Pytest configuration and fixtures."""

from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from vocabdeck.core import container
from vocabdeck.domain.common.value_objects import LessonId, UnitId
from vocabdeck.domain.learning.entities.card import Card
from vocabdeck.domain.learning.value_objects import (
    CardClass,
    Conjugations,
    Gender,
    Language,
    VerbType,
)
from vocabdeck.infrastructure.learning.services import SimulatedCardExtractionService
from vocabdeck.main import app

# Lessons seeded by the default unit hierarchy
BASICS_UNIT_ID = "u1"
GREETINGS_LESSON_ID = "l1_1"
NUMBERS_LESSON_ID = "l1_2"
TRAVEL_UNIT_ID = "u2"
AIRPORT_LESSON_ID = "l2_1"

PARLER_FORMS = ["parle", "parles", "parle", "parlons", "parlez", "parlent"]


def create_test_card(
    word: str = "table",
    translation: str = "طاولة",
    card_class: CardClass = CardClass.NOUN,
    language: Language = Language.FRENCH,
    unit_id: str = BASICS_UNIT_ID,
    lesson_id: str = GREETINGS_LESSON_ID,
    **kwargs: Any,
) -> Card:
    """Create a card filed under the given lesson."""
    return Card.create(
        word=word,
        translation=translation,
        card_class=card_class,
        language=language,
        unit_id=UnitId(unit_id),
        lesson_id=LessonId(lesson_id),
        **kwargs,
    )


def create_test_verb(
    word: str = "parler",
    forms: list[str | None] | None = None,
    lesson_id: str = GREETINGS_LESSON_ID,
    verb_type: VerbType | None = None,
    **kwargs: Any,
) -> Card:
    """Create a French verb card; ``forms=None`` gives a verb without conjugations."""
    return create_test_card(
        word=word,
        translation="يتحدث",
        card_class=CardClass.VERB,
        lesson_id=lesson_id,
        infinitive=word,
        verb_type=verb_type or (VerbType.REGULAR if forms is not None else None),
        conjugations=Conjugations.from_slots(forms) if forms is not None else None,
        **kwargs,
    )


def create_test_noun(
    word: str = "table", gender: Gender = Gender.FEM, lesson_id: str = GREETINGS_LESSON_ID
) -> Card:
    return create_test_card(word=word, gender=gender, lesson_id=lesson_id, article="la")


@pytest.fixture(autouse=True)
def reset_container() -> Generator[None, None, None]:
    """Give every test fresh repositories, a fresh store and instant extraction."""
    container.reset_singletons()
    with container.card_extraction_service.override(
        SimulatedCardExtractionService(delay_seconds=0)
    ):
        yield
    container.reset_singletons()


@pytest.fixture
def client() -> Generator[TestClient, Any, None]:
    """Create a test client for the API."""
    with TestClient(app) as test_client:
        yield test_client
