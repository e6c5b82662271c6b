"""Pydantic schemas for Unit and Lesson API request/response validation."""

from pydantic import BaseModel, Field


class LessonResponse(BaseModel):
    id: str
    name: str


class UnitResponse(BaseModel):
    id: str
    name: str
    lessons: list[LessonResponse]


class UnitListResponse(BaseModel):
    units: list[UnitResponse]


class NameRequest(BaseModel):
    """Schema for creating or renaming a unit or lesson."""

    name: str = Field(..., min_length=1, description="Display name")
