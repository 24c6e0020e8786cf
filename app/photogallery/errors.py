"""Layout error taxonomy.

Everything here subclasses ValueError so callers that already guard layout
calls with ``except ValueError`` keep working.
"""

from __future__ import annotations

from typing import Optional


class LayoutError(ValueError):
    """Base class for rejected layout input."""


class ItemValidationError(LayoutError):
    def __init__(self, index: int, message: str) -> None:
        super().__init__(f"photo[{index}]: {message}")
        self.index = index


class ParameterError(LayoutError):
    def __init__(self, parameter: str, message: str, value: Optional[object] = None) -> None:
        super().__init__(f"{parameter}: {message} (got {value!r})")
        self.parameter = parameter
        self.value = value
