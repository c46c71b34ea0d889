"""
Mutable Matrix Container

``JamMatrix`` owns a single storage strategy (dense, diagonal or sparse) and
exposes in-place mutation. Every write is routed through the storage's
``set()``, and the container keeps whatever storage that returns, so a
diagonal matrix transparently becomes sparse on its first off-diagonal
non-zero write. ``get``/``set`` behave identically across representations;
only ``backend`` and ``is_dense`` reveal the difference.

Construction:
    - ``dense()``, ``copy_of()``, ``byrow()``, ``dyad()``: owned dense array
    - ``wrap()``: borrowed dense array (writes visible both ways)
    - ``diag()``, ``identity()``: diagonal storage
    - ``sparse()``: empty sparse storage

Example:
    >>> m = JamMatrix.identity(3)
    >>> m.backend
    <Backend.DIAGONAL: 'diagonal'>
    >>> m.set(0, 1, 0.0)       # zero off-diagonal write: no-op
    >>> m.backend
    <Backend.DIAGONAL: 'diagonal'>
    >>> m.set(0, 1, 5.0)       # promotes
    >>> m.backend
    <Backend.SPARSE: 'sparse'>
"""

from __future__ import annotations

import math
from typing import Any, Callable, Iterable, List, Optional, Tuple, Union

import numpy as np

from ..error import (
    DimensionMismatchError,
    JamTypeError,
    UnsupportedOperationError,
    check_length,
)
from ..vector._base import VectorView
from ..vector._vector import JamVector
from ._base import MatrixView, as_matrix_view, as_vector_view
from ._storage import (
    Backend,
    DenseMatrixStorage,
    DiagonalStorage,
    MatrixStorage,
    Ownership,
    SparseStorage,
)

__all__ = ["JamMatrix"]

MatrixOperand = Union[MatrixView, np.ndarray]


class JamMatrix(MatrixView):
    """
    Mutable matrix of float64 values.

    Attributes:
        nrow: Number of rows.
        ncol: Number of columns.
        backend: Current storage representation.
        ownership: Whether the backing data is owned or borrowed.
        is_dense: Whether the storage is a full dense array.
    """

    def __init__(self, storage: MatrixStorage):
        self._storage = storage

    # =========================================================================
    # Factory Methods
    # =========================================================================

    @classmethod
    def dense(cls, nrow: int, ncol: int) -> "JamMatrix":
        """Create a zero-filled dense matrix."""
        check_length(nrow, "row count")
        check_length(ncol, "column count")
        return cls(DenseMatrixStorage.zeros(nrow, ncol))

    @classmethod
    def sparse(cls, nrow: int, ncol: int) -> "JamMatrix":
        """Create an empty sparse matrix."""
        check_length(nrow, "row count")
        check_length(ncol, "column count")
        return cls(SparseStorage.zeros(nrow, ncol))

    @classmethod
    def copy_of(cls, source: MatrixOperand) -> "JamMatrix":
        """
        Create a dense matrix holding an independent copy of the source.

        Args:
            source: A matrix view or a two-dimensional array-like

        Raises:
            DimensionMismatchError: If an array source is not two-dimensional
        """
        if isinstance(source, MatrixView):
            data = source.to_array()
        else:
            data = np.array(source, dtype=np.float64)
            if data.ndim != 2:
                raise DimensionMismatchError(f"Expected a two-dimensional array, got shape {data.shape}.")

        return cls(DenseMatrixStorage(data, Ownership.OWNED))

    @classmethod
    def wrap(cls, array: np.ndarray) -> "JamMatrix":
        """
        Create a matrix that aliases a caller array.

        ``wrap(array).get(i, j) == array[i, j]`` for all valid positions, and
        writes through the matrix modify ``array`` in place. The caller must
        keep the array alive for the lifetime of the matrix.

        Raises:
            JamTypeError: If ``array`` is not a float64 ndarray
            DimensionMismatchError: If ``array`` is not two-dimensional
        """
        if not isinstance(array, np.ndarray) or array.dtype != np.float64:
            raise JamTypeError("Only float64 numpy arrays may be wrapped.")
        if array.ndim != 2:
            raise DimensionMismatchError(f"Expected a two-dimensional array, got shape {array.shape}.")

        return cls(DenseMatrixStorage(array, Ownership.BORROWED))

    @classmethod
    def byrow(cls, nrow: int, ncol: int, *elements: float) -> "JamMatrix":
        """
        Create a dense matrix from elements listed in row-major order.

        Example:
            >>> JamMatrix.byrow(2, 3, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0).get(1, 0)
            4.0

        Raises:
            DimensionMismatchError: If ``len(elements) != nrow * ncol``
        """
        check_length(nrow, "row count")
        check_length(ncol, "column count")

        if len(elements) != nrow * ncol:
            raise DimensionMismatchError(
                f"Expected [{nrow * ncol}] elements for a {nrow}x{ncol} matrix, got [{len(elements)}]."
            )

        data = np.array(elements, dtype=np.float64).reshape(nrow, ncol)
        return cls(DenseMatrixStorage(data))

    @classmethod
    def diag(cls, values: Union[VectorView, np.ndarray, Iterable[float]]) -> "JamMatrix":
        """Create a square diagonal matrix with the given diagonal."""
        return cls(DiagonalStorage(JamVector.copy_of(values).to_array()))

    @classmethod
    def identity(cls, n: int) -> "JamMatrix":
        """Create an ``n x n`` identity matrix (diagonal storage)."""
        check_length(n, "matrix size")
        return cls(DiagonalStorage(np.ones(n, dtype=np.float64)))

    @classmethod
    def dyad(cls, x: Any, y: Optional[Any] = None) -> "JamMatrix":
        """
        Outer product ``x * y^T``; ``x * x^T`` when ``y`` is omitted.
        """
        x_values = as_vector_view(x).to_array()
        y_values = x_values if y is None else as_vector_view(y).to_array()
        return cls(DenseMatrixStorage(np.outer(x_values, y_values)))

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def nrow(self) -> int:
        return self._storage.nrow

    @property
    def ncol(self) -> int:
        return self._storage.ncol

    @property
    def backend(self) -> Backend:
        return self._storage.backend

    @property
    def ownership(self) -> Ownership:
        return self._storage.ownership

    @property
    def is_dense(self) -> bool:
        return self._storage.backend is Backend.DENSE

    # =========================================================================
    # Element Access
    # =========================================================================

    def get(self, row: int, col: int) -> float:
        return self._storage.get(self.validate_row(row), self.validate_column(col))

    def set(self, row: int, col: int, value: float) -> None:
        """Assign one cell; the storage handle is replaced if it changes."""
        self._storage = self._storage.set(self.validate_row(row), self.validate_column(col), float(value))

    def to_array(self) -> np.ndarray:
        return self._storage.to_array()

    def copy(self) -> "JamMatrix":
        """Return an independent, owned copy in the same representation."""
        return JamMatrix(self._storage.copy())

    # =========================================================================
    # In-place Arithmetic
    # =========================================================================

    def add(self, operand: Union[float, MatrixOperand]) -> "JamMatrix":
        """Add a scalar to every cell, or another matrix elementwise."""
        if not np.isscalar(operand):
            return self.daxpy(1.0, operand)

        if self.is_dense:
            self._storage.transform(lambda values: values + operand)
        else:
            for row in range(self.nrow):
                for col in range(self.ncol):
                    self.set(row, col, self.get(row, col) + operand)
        return self

    def add_at(self, row: int, col: int, scalar: float) -> "JamMatrix":
        """Add a scalar to a single cell."""
        self.set(row, col, self.get(row, col) + scalar)
        return self

    def subtract(self, operand: Union[float, MatrixOperand]) -> "JamMatrix":
        """Subtract a scalar from every cell, or another matrix elementwise."""
        if np.isscalar(operand):
            return self.add(-operand)
        return self.daxpy(-1.0, operand)

    def daxpy(self, scalar: float, that: MatrixOperand) -> "JamMatrix":
        """
        Compute ``this[i, j] = this[i, j] + scalar * that[i, j]`` for every cell.

        Raises:
            DimensionMismatchError: If the shapes differ (nothing is modified)
        """
        that = self.validate_addend(as_matrix_view(that))

        if self.is_dense:
            self._storage.data += scalar * that.to_array()
        elif math.isfinite(scalar):
            for row, col, value in _nonzero_cells(that):
                self.add_at(row, col, scalar * value)
        else:
            # scalar * 0 is NaN, so every cell of that contributes
            for element in list(that.stream_elements()):
                self.add_at(element.row, element.col, scalar * element.value)
        return self

    def multiply(self, scalar: float) -> "JamMatrix":
        return self._transform(lambda values: np.multiply(values, scalar))

    def multiply_at(self, row: int, col: int, scalar: float) -> "JamMatrix":
        """Multiply a single cell by a scalar."""
        self.set(row, col, self.get(row, col) * scalar)
        return self

    def divide(self, scalar: float) -> "JamMatrix":
        return self._transform(lambda values: np.divide(values, scalar))

    def _transform(self, func: Callable[[np.ndarray], np.ndarray]) -> "JamMatrix":
        """
        Apply an elementwise function to every cell.

        Diagonal and sparse storage only visit stored cells, which is exact
        when ``func(0.0) == 0.0``. Otherwise (for example ``x * inf`` or
        ``x / 0``) every cell is rewritten through ``set()``, so implicit
        zeros take the same value they would in dense storage.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            preserves_zero = func(np.float64(0.0)) == 0.0

        if self.is_dense or preserves_zero:
            self._storage.transform(func)
        else:
            for row in range(self.nrow):
                for col in range(self.ncol):
                    self.set(row, col, func(np.float64(self.get(row, col))))
        return self

    # =========================================================================
    # Linear Algebra
    # =========================================================================

    def _times_vector(self, vector: VectorView) -> JamVector:
        return JamVector.copy_of(np.asarray(self._storage.matmul(vector.to_array())))

    def _times_matrix(self, that: MatrixView) -> "JamMatrix":
        product = np.asarray(self._storage.matmul(that.to_array()), dtype=np.float64)
        return JamMatrix(DenseMatrixStorage(product))

    # =========================================================================
    # Equality
    # =========================================================================

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, MatrixView):
            return NotImplemented
        return self.equals_matrix(other)

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        raise UnsupportedOperationError("Matrices are mutable and may not be hashed.")

    def __repr__(self) -> str:
        return (
            f"JamMatrix(shape={self.shape}, backend={self.backend.value}, "
            f"ownership={self.ownership.value})"
        )


def _nonzero_cells(matrix: MatrixView) -> List[Tuple[int, int, float]]:
    """Cells of a matrix with a non-zero value, materialized before any write."""
    if isinstance(matrix, JamMatrix):
        cells = matrix._storage.stored()
    else:
        cells = ((element.row, element.col, element.value) for element in matrix.stream_elements())
    return [(row, col, value) for row, col, value in cells if value != 0.0]
