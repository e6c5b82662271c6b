from .card_extraction_service import CardExtractionServiceProtocol, SourceFile
from .card_repository import CardRepositoryProtocol
from .unit_repository import UnitRepositoryProtocol

__all__ = [
    "CardExtractionServiceProtocol",
    "CardRepositoryProtocol",
    "SourceFile",
    "UnitRepositoryProtocol",
]
