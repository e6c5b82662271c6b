from .card_store import CardStore

__all__ = ["CardStore"]
