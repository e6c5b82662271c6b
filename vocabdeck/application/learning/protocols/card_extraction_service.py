from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from vocabdeck.domain.common.value_objects import LessonId, UnitId
from vocabdeck.domain.learning.entities.card import Card
from vocabdeck.domain.learning.value_objects import Language


@dataclass(frozen=True)
class SourceFile:
    filename: str
    content_type: str | None
    content: bytes


class CardExtractionServiceProtocol(Protocol):
    async def extract_cards(
        self,
        files: Sequence[SourceFile],
        language: Language,
        unit_id: UnitId,
        lesson_id: LessonId,
    ) -> list[Card]: ...
