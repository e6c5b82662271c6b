"""Pydantic schemas for Card API request/response validation and storage."""

from datetime import datetime

from pydantic import BaseModel, Field

from vocabdeck.domain.learning.value_objects import CardClass, Gender, Language, VerbType
from vocabdeck.infrastructure.common.schemas import Identifier


class CardRecord(BaseModel):
    """Schema for a stored card, used in responses and the JSON card file."""

    id: str = Field(..., min_length=1)
    word: str
    article: str | None = None
    translation: str
    card_class: CardClass
    gender: Gender = Gender.NONE
    infinitive: str | None = None
    verb_type: VerbType | None = None
    conjugations: list[str | None] | None = Field(
        None,
        min_length=6,
        max_length=6,
        description="je, tu, il/elle, nous, vous, ils/elles; null for an unknown form",
    )
    synonyms: list[str] | None = None
    antonyms: list[str] | None = None
    language: Language
    unit_id: str = Field(..., min_length=1)
    lesson_id: str = Field(..., min_length=1)
    created_at: datetime


class ManualCardCreateRequest(BaseModel):
    """Schema for the manual entry form."""

    language: Language
    unit_id: Identifier = Field(..., description="Destination unit")
    lesson_id: Identifier = Field(..., description="Destination lesson")
    word: str = Field(..., min_length=1, description="Word as typed, possibly with its article")
    translation: str = Field(..., min_length=1, description="Translation of the word")
    card_class: CardClass
    gender: Gender = Gender.NONE
    verb_type: VerbType | None = None
    conjugations: list[str | None] = Field(
        default_factory=list,
        max_length=6,
        description="Up to six conjugated forms; blanks are allowed",
    )
    synonyms: list[str] = Field(default_factory=list, description="English only")
    antonyms: list[str] = Field(default_factory=list, description="English only")


class CardCreateResponse(BaseModel):
    """Schema for manual card creation response."""

    success: bool = Field(..., description="Whether the creation was successful")
    message: str = Field(..., description="Response message")
    inserted: bool = Field(..., description="False when the card was merged into a duplicate")
    card: CardRecord = Field(..., description="The stored card")


class CardListResponse(BaseModel):
    """Schema for list of cards response."""

    cards: list[CardRecord] = Field(..., description="List of cards")
    total: int


class CardExtractionResponse(BaseModel):
    """Schema for the result of extracting cards from uploaded files."""

    success: bool
    message: str
    extracted_count: int = Field(..., description="Cards produced by extraction")
    inserted_count: int = Field(..., description="Cards added as new entries")
    enriched_count: int = Field(..., description="Existing cards that gained data")
