"""Shared field types for request schemas."""

from typing import Annotated

from pydantic import StringConstraints

# Unit, lesson and card ids as sent by clients; surrounding whitespace is dropped
Identifier = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
