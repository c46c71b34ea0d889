"""
Vector Elements

Immutable (index, value) pairs produced when streaming a vector.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .._config import default_comparator
from ..error import JamIndexError

__all__ = ["VectorElement"]


@dataclass(frozen=True)
class VectorElement:
    """
    A single element of a vector.

    Attributes:
        index: Position of the element, never negative.
        value: Element value.

    Example:
        >>> element = VectorElement(3, -1.5)
        >>> element.is_negative()
        True
    """
    index: int
    value: float

    def __post_init__(self):
        if self.index < 0:
            raise JamIndexError(f"Invalid element index: [{self.index}].")

    def is_finite(self) -> bool:
        return math.isfinite(self.value)

    def is_negative(self) -> bool:
        return default_comparator().is_negative(self.value)

    def is_non_zero(self) -> bool:
        return default_comparator().is_non_zero(self.value)

    def is_positive(self) -> bool:
        return default_comparator().is_positive(self.value)

    def is_zero(self) -> bool:
        return default_comparator().is_zero(self.value)

    def __str__(self) -> str:
        return f"[{self.index}] = {self.value}"
