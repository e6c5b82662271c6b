from .simulated_extraction_service import SimulatedCardExtractionService

__all__ = ["SimulatedCardExtractionService"]
