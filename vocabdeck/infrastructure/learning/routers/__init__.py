from .cards import router as cards_router
from .training import router as training_router
from .units import router as units_router

__all__ = ["cards_router", "training_router", "units_router"]
