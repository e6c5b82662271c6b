"""Card repository persisting the collection to a JSON file."""

import os
import tempfile
from collections.abc import Sequence
from pathlib import Path

import structlog
from pydantic import TypeAdapter

from vocabdeck.domain.learning.entities.card import Card
from vocabdeck.infrastructure.learning.mappers.card_mapper import CardMapper
from vocabdeck.infrastructure.learning.schemas.card_schemas import CardRecord

logger = structlog.get_logger(__name__)

_RECORDS = TypeAdapter(list[CardRecord])


class JsonFileCardRepository:
    """
    Stores the whole collection as a JSON array of card records.

    A missing file loads as an empty collection. Saves go through a
    temporary file in the same directory and replace the target at once.
    """

    def __init__(self, path: Path, mapper: CardMapper | None = None) -> None:
        self.path = Path(path)
        self.mapper = mapper or CardMapper()

    def load(self) -> list[Card]:
        if not self.path.exists():
            logger.info("card_file_missing", path=str(self.path))
            return []

        records = _RECORDS.validate_json(self.path.read_bytes())
        return [self.mapper.to_domain(record) for record in records]

    def save(self, cards: Sequence[Card]) -> None:
        records = [self.mapper.to_record(card) for card in cards]
        payload = _RECORDS.dump_json(records, indent=2)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".cards-", suffix=".json")
        try:
            with os.fdopen(fd, "wb") as tmp:
                tmp.write(payload)
            Path(tmp_name).replace(self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug("card_file_saved", path=str(self.path), card_count=len(records))
