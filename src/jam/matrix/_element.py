"""
Matrix Elements

Immutable (row, col, value) triples produced when streaming a matrix.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .._config import default_comparator
from ..error import JamIndexError

__all__ = ["MatrixElement"]


@dataclass(frozen=True)
class MatrixElement:
    """
    A single element of a matrix.

    Attributes:
        row: Row index, never negative.
        col: Column index, never negative.
        value: Element value.
    """
    row: int
    col: int
    value: float

    def __post_init__(self):
        if self.row < 0:
            raise JamIndexError(f"Invalid row index: [{self.row}].")
        if self.col < 0:
            raise JamIndexError(f"Invalid column index: [{self.col}].")

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
        return f"[{self.row}, {self.col}] = {self.value}"
