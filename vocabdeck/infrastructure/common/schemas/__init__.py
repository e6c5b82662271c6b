from .identifiers import Identifier

__all__ = ["Identifier"]
