"""
Matrix Projections and Wrappers

Row, column and diagonal views are non-owning ``VectorView`` adapters: each
holds a reference to its matrix plus an index and reads through ``get()``
on every access. The matrix must outlive the view; writes to the matrix are
visible through any view taken from it.
"""

from __future__ import annotations

import numpy as np

from ..error import DimensionMismatchError
from ..vector._base import VectorView
from ._base import MatrixView

__all__ = ["RowView", "ColumnView", "DiagonalView", "ArrayWrapper"]


# =============================================================================
# Vector Projections
# =============================================================================

class RowView(VectorView):
    """One row of a matrix as a vector."""

    def __init__(self, matrix: MatrixView, row: int):
        self._matrix = matrix
        self._row = matrix.validate_row(row)

    @property
    def length(self) -> int:
        return self._matrix.ncol

    @property
    def row(self) -> int:
        return self._row

    def get(self, index: int) -> float:
        return self._matrix.get(self._row, self.validate_index(index))


class ColumnView(VectorView):
    """One column of a matrix as a vector."""

    def __init__(self, matrix: MatrixView, col: int):
        self._matrix = matrix
        self._col = matrix.validate_column(col)

    @property
    def length(self) -> int:
        return self._matrix.nrow

    @property
    def col(self) -> int:
        return self._col

    def get(self, index: int) -> float:
        return self._matrix.get(self.validate_index(index), self._col)


class DiagonalView(VectorView):
    """The diagonal of a square matrix as a vector."""

    def __init__(self, matrix: MatrixView):
        matrix.validate_square()
        self._matrix = matrix

    @property
    def length(self) -> int:
        return self._matrix.nrow

    def get(self, index: int) -> float:
        self.validate_index(index)
        return self._matrix.get(index, index)


# =============================================================================
# Array Wrapper
# =============================================================================

class ArrayWrapper(MatrixView):
    """
    Read-only matrix aliasing a two-dimensional caller array.

    The array is not copied; the caller must keep it alive.
    """

    def __init__(self, array: np.ndarray):
        if array.ndim != 2:
            raise DimensionMismatchError(f"Expected a two-dimensional array, got shape {array.shape}.")
        self._array = array

    @property
    def nrow(self) -> int:
        return self._array.shape[0]

    @property
    def ncol(self) -> int:
        return self._array.shape[1]

    def get(self, row: int, col: int) -> float:
        return float(self._array[self.validate_row(row), self.validate_column(col)])

    def to_array(self) -> np.ndarray:
        return np.array(self._array, dtype=np.float64)
