from .card_repository_factory import create_card_repository
from .in_memory_card_repository import InMemoryCardRepository
from .in_memory_unit_repository import DEFAULT_UNITS, InMemoryUnitRepository
from .json_file_card_repository import JsonFileCardRepository

__all__ = [
    "DEFAULT_UNITS",
    "InMemoryCardRepository",
    "InMemoryUnitRepository",
    "JsonFileCardRepository",
    "create_card_repository",
]
