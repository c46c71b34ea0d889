"""
Matrix View Base Class

``MatrixView`` is the two-dimensional analog of ``VectorView``: implementations
supply ``nrow``, ``ncol`` and ``get(row, col)``, and every other operation is
derived from those three.

Type Hierarchy:

    MatrixView (ABC)
    ├── JamMatrix     - Mutable container over a storage strategy
    └── ArrayWrapper  - Read-only alias of a caller array

Projections:
    ``view_row``, ``view_column`` and ``view_diagonal`` return zero-copy
    ``VectorView`` adapters holding a reference to this matrix and an index.
    Indexes (and squareness, for the diagonal) are validated when the view is
    created, not when it is first read. A projection reflects later writes
    to the matrix it was taken from.

Example:

    >>> m = MatrixView.of(np.array([[1.0, 2.0], [3.0, 4.0]]))
    >>> m.trace()
    5.0
    >>> m.times(VectorView.of(1.0, 1.0)).to_array()
    array([3., 7.])
    >>> m.view_column(1).to_array()
    array([2., 4.])
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator, Optional, Tuple, Union

import numpy as np

from .._config import default_comparator
from ..error import DimensionMismatchError, DomainError, check_index
from ..vector._base import VectorView

if TYPE_CHECKING:
    from ..math.comparator import DoubleComparator
    from ..vector._vector import JamVector
    from ._element import MatrixElement
    from ._matrix import JamMatrix
    from ._views import ColumnView, DiagonalView, RowView

__all__ = ["MatrixView", "as_matrix_view", "as_vector_view"]


class MatrixView(ABC):
    """
    Read-only matrix of float64 values.

    Required (subclasses must implement):
        nrow: Number of rows.
        ncol: Number of columns.
        get(row, col): Element at a valid position.

    Derived:
        shape, size, equals_matrix, equals_array, is_square, is_symmetric,
        times, trace, transpose, to_array, stream_values, stream_elements,
        stream_non_zero, view_row, view_column, view_diagonal
    """

    # =========================================================================
    # Abstract Interface
    # =========================================================================

    @property
    @abstractmethod
    def nrow(self) -> int:
        """Number of rows."""
        ...

    @property
    @abstractmethod
    def ncol(self) -> int:
        """Number of columns."""
        ...

    @abstractmethod
    def get(self, row: int, col: int) -> float:
        """
        Return the element at a position.

        Raises:
            JamIndexError: If either index is out of bounds
        """
        ...

    # =========================================================================
    # Derived Properties
    # =========================================================================

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.nrow, self.ncol)

    @property
    def size(self) -> int:
        """Total number of cells, ``nrow * ncol``."""
        return self.nrow * self.ncol

    # =========================================================================
    # Factories
    # =========================================================================

    @staticmethod
    def of(array: np.ndarray) -> "MatrixView":
        """Create a read-only view aliasing a two-dimensional array."""
        from ._views import ArrayWrapper
        return ArrayWrapper(np.asarray(array))

    # =========================================================================
    # Validation
    # =========================================================================

    def validate_row(self, row: int) -> int:
        return check_index(row, self.nrow, "row")

    def validate_column(self, col: int) -> int:
        return check_index(col, self.ncol, "column")

    def validate_addend(self, that: "MatrixView") -> "MatrixView":
        """
        Ensure that another matrix has the same shape as this one.

        Raises:
            DimensionMismatchError: If the shapes differ
        """
        if that.shape != self.shape:
            raise DimensionMismatchError(
                f"Matrix shape mismatch: {self.shape} != {that.shape}."
            )
        return that

    def validate_square(self) -> None:
        if not self.is_square():
            raise DomainError(f"Square matrix required, got shape {self.shape}.")

    # =========================================================================
    # Equality and Structure
    # =========================================================================

    def equals_matrix(self, that: "MatrixView", comparator: Optional["DoubleComparator"] = None) -> bool:
        """Shape-then-elementwise equality within a tolerance."""
        if comparator is None:
            comparator = default_comparator()

        if self.shape != that.shape:
            return False

        for row in range(self.nrow):
            for col in range(self.ncol):
                if not comparator.equals(self.get(row, col), that.get(row, col)):
                    return False

        return True

    def equals_array(self, array: np.ndarray, comparator: Optional["DoubleComparator"] = None) -> bool:
        """Elementwise equality with a two-dimensional array within a tolerance."""
        array = np.asarray(array, dtype=np.float64)
        if array.ndim != 2:
            return False
        return self.equals_matrix(MatrixView.of(array), comparator)

    def is_square(self) -> bool:
        return self.nrow == self.ncol

    def is_symmetric(self, comparator: Optional["DoubleComparator"] = None) -> bool:
        """
        Whether ``get(r, c)`` equals ``get(c, r)`` within tolerance for all
        ``r < c``. Non-square matrices are never symmetric.
        """
        if not self.is_square():
            return False

        if comparator is None:
            comparator = default_comparator()

        for row in range(self.nrow):
            for col in range(row + 1, self.ncol):
                if not comparator.equals(self.get(row, col), self.get(col, row)):
                    return False

        return True

    # =========================================================================
    # Linear Algebra
    # =========================================================================

    def times(self, operand: Union["MatrixView", VectorView, np.ndarray]) -> Union["JamVector", "JamMatrix"]:
        """
        Matrix-vector or matrix-matrix product.

        Each result cell is the dot product of a row of this matrix with the
        operand vector or a column of the operand matrix.

        Args:
            operand: A vector (length ``ncol``) or a matrix (``ncol`` rows)

        Returns:
            JamVector of length ``nrow`` or JamMatrix of shape
            ``(nrow, operand.ncol)``

        Raises:
            DimensionMismatchError: If the inner dimensions disagree
        """
        if isinstance(operand, MatrixView) or (isinstance(operand, np.ndarray) and operand.ndim == 2):
            that = as_matrix_view(operand)
            if self.ncol != that.nrow:
                raise DimensionMismatchError(
                    f"Inner dimensions disagree: {self.shape} x {that.shape}."
                )
            return self._times_matrix(that)

        vector = as_vector_view(operand)
        if vector.length != self.ncol:
            raise DimensionMismatchError(
                f"Vector length [{vector.length}] does not match matrix columns [{self.ncol}]."
            )
        return self._times_vector(vector)

    def _times_vector(self, vector: VectorView) -> "JamVector":
        from ..vector._vector import JamVector

        result = JamVector.dense(self.nrow)
        for row in range(self.nrow):
            result.set(row, self.view_row(row).dot(vector))
        return result

    def _times_matrix(self, that: "MatrixView") -> "JamMatrix":
        from ._matrix import JamMatrix

        result = JamMatrix.dense(self.nrow, that.ncol)
        columns = [that.view_column(col) for col in range(that.ncol)]
        for row in range(self.nrow):
            row_view = self.view_row(row)
            for col, column_view in enumerate(columns):
                result.set(row, col, row_view.dot(column_view))
        return result

    def trace(self) -> float:
        """
        Sum of the diagonal elements.

        Raises:
            DomainError: If the matrix is not square
        """
        self.validate_square()
        return float(sum(self.get(index, index) for index in range(self.nrow)))

    def transpose(self) -> "JamMatrix":
        """Return the transpose as a new dense matrix."""
        from ._matrix import JamMatrix
        return JamMatrix.copy_of(self.to_array().T)

    # =========================================================================
    # Streaming and Materialization
    # =========================================================================

    def stream_values(self) -> Iterator[float]:
        """Values in row-major order."""
        for row in range(self.nrow):
            for col in range(self.ncol):
                yield self.get(row, col)

    def stream_elements(self) -> Iterator["MatrixElement"]:
        from ._element import MatrixElement
        for row in range(self.nrow):
            for col in range(self.ncol):
                yield MatrixElement(row, col, self.get(row, col))

    def stream_non_zero(self) -> Iterator["MatrixElement"]:
        """Elements that are non-zero under the default comparator."""
        return (element for element in self.stream_elements() if element.is_non_zero())

    def to_array(self) -> np.ndarray:
        """Return all cells in a new ``(nrow, ncol)`` array."""
        values = np.fromiter(self.stream_values(), dtype=np.float64, count=self.size)
        return values.reshape(self.shape)

    # =========================================================================
    # Projections
    # =========================================================================

    def view_row(self, row: int) -> "RowView":
        """Zero-copy view of one row; the index is validated immediately."""
        from ._views import RowView
        return RowView(self, row)

    def view_column(self, col: int) -> "ColumnView":
        """Zero-copy view of one column; the index is validated immediately."""
        from ._views import ColumnView
        return ColumnView(self, col)

    def view_diagonal(self) -> "DiagonalView":
        """
        Zero-copy view of the diagonal.

        Raises:
            DomainError: If the matrix is not square
        """
        from ._views import DiagonalView
        return DiagonalView(self)

    # =========================================================================
    # Python Protocol
    # =========================================================================

    def __getitem__(self, index: Tuple[int, int]) -> float:
        row, col = index
        return self.get(row, col)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shape={self.shape})"


# =============================================================================
# Operand Coercion
# =============================================================================

def as_vector_view(operand) -> VectorView:
    """Return a VectorView for a vector operand (views pass through)."""
    if isinstance(operand, VectorView):
        return operand
    return VectorView.of(np.asarray(operand, dtype=np.float64))


def as_matrix_view(operand) -> MatrixView:
    """Return a MatrixView for a matrix operand (views pass through)."""
    if isinstance(operand, MatrixView):
        return operand
    return MatrixView.of(np.asarray(operand, dtype=np.float64))
