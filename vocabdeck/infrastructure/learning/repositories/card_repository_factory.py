from vocabdeck.application.learning.protocols.card_repository import CardRepositoryProtocol
from vocabdeck.config import Settings

from .in_memory_card_repository import InMemoryCardRepository
from .json_file_card_repository import JsonFileCardRepository


def create_card_repository(settings: Settings) -> CardRepositoryProtocol:
    """Pick the card repository configured by ``CARDS_FILE``."""
    if settings.CARDS_FILE is not None:
        return JsonFileCardRepository(settings.CARDS_FILE)
    return InMemoryCardRepository()
