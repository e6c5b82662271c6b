"""Pydantic schemas for training setup endpoints."""

from pydantic import BaseModel, Field

from vocabdeck.domain.learning.value_objects import CardClass, Language, QuestionType
from vocabdeck.infrastructure.common.schemas import Identifier


class TrainingScopeRequest(BaseModel):
    """Schema for a lesson/class filter selection."""

    language: Language
    lesson_ids: list[Identifier] = Field(
        default_factory=list, description="Selected lessons; none selected counts nothing"
    )
    card_classes: list[CardClass] = Field(
        default_factory=list, description="Selected word classes; none selected means all"
    )


class TrainingCountsResponse(BaseModel):
    """Schema for eligible card counts per question type."""

    counts: dict[QuestionType, int]


class TrainingSessionRequest(TrainingScopeRequest):
    """Schema for configuring a training session."""

    question_types: list[QuestionType] = Field(..., min_length=1)
    card_limit: int | None = Field(None, ge=1, description="Requested number of cards")


class TrainingSessionResponse(BaseModel):
    """Schema for a validated training session configuration."""

    language: Language
    lesson_ids: list[str]
    card_classes: list[CardClass]
    question_types: list[QuestionType]
    card_limit: int
    counts: dict[QuestionType, int]
    dropped_question_types: list[QuestionType]
    max_cards_available: int
