from .card_mapper import CardMapper
from .unit_mapper import UnitMapper

__all__ = ["CardMapper", "UnitMapper"]
