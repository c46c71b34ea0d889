"""
Matrix Storage Strategies

This module defines the physical representations behind ``JamMatrix``:

    - DENSE: Every cell stored in a two-dimensional float64 array, either
      owned or borrowed from the caller (wrap construction).
    - DIAGONAL: Only the diagonal of a square matrix is stored.
    - SPARSE: General sparse storage in a ``scipy.sparse.dok_array``.

Design Philosophy:
    Every write goes through ``MatrixStorage.set()``, which returns the
    storage now holding the data. The container replaces its handle with
    the returned object, so a storage never has to mutate itself into an
    incompatible representation.

Diagonal Promotion:
    ``DiagonalStorage.set()`` at an off-diagonal cell with a value that is
    non-zero within tolerance allocates a sparse store of the same shape,
    copies the diagonal into it, applies the write and returns the sparse
    store. An off-diagonal write of zero leaves the diagonal store in place
    and changes nothing. Diagonal writes never promote, and sparse storage
    never reverts to diagonal.

    DIAGONAL ──set(r != c, x != 0)──> SPARSE
       │  ▲
       └──┘ set(r == c, x) / set(r != c, 0)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Iterator, Tuple

import numpy as np
from scipy import sparse

from .._config import default_comparator
from ..vector._storage import Ownership

logger = logging.getLogger("jam.matrix")

__all__ = [
    "Backend",
    "Ownership",
    "MatrixStorage",
    "DenseMatrixStorage",
    "DiagonalStorage",
    "SparseStorage",
]


# =============================================================================
# Enumerations
# =============================================================================

class Backend(Enum):
    """Matrix storage representation.

    Attributes:
        DENSE: Full two-dimensional array, owned or borrowed.
        DIAGONAL: Diagonal entries of a square matrix only.
                  Promotes to SPARSE on the first off-diagonal non-zero write.
        SPARSE: Dictionary-of-keys sparse array.

    Example:
        >>> JamMatrix.identity(3).backend
        <Backend.DIAGONAL: 'diagonal'>
    """
    DENSE = "dense"
    DIAGONAL = "diagonal"
    SPARSE = "sparse"


# =============================================================================
# Storage Interface
# =============================================================================

class MatrixStorage(ABC):
    """
    Physical representation of a mutable matrix.

    Indexes passed to storage methods are already validated by the container.
    """

    @property
    @abstractmethod
    def nrow(self) -> int:
        ...

    @property
    @abstractmethod
    def ncol(self) -> int:
        ...

    @property
    @abstractmethod
    def backend(self) -> Backend:
        ...

    @property
    def ownership(self) -> Ownership:
        return Ownership.OWNED

    @abstractmethod
    def get(self, row: int, col: int) -> float:
        ...

    @abstractmethod
    def set(self, row: int, col: int, value: float) -> "MatrixStorage":
        """Assign one cell and return the storage now holding the data."""
        ...

    @abstractmethod
    def stored(self) -> Iterator[Tuple[int, int, float]]:
        """Yield ``(row, col, value)`` for every physically stored cell."""
        ...

    @abstractmethod
    def transform(self, func: Callable[[np.ndarray], np.ndarray]) -> None:
        """Apply an elementwise function to every stored value in place."""
        ...

    @abstractmethod
    def matmul(self, operand: np.ndarray) -> np.ndarray:
        """Return the dense product of this matrix with an array operand."""
        ...

    @abstractmethod
    def copy(self) -> "MatrixStorage":
        """Return an independent, owned copy in the same representation."""
        ...

    @abstractmethod
    def to_array(self) -> np.ndarray:
        """Return all cells in a new dense array."""
        ...


# =============================================================================
# Dense Storage
# =============================================================================

class DenseMatrixStorage(MatrixStorage):
    """Two-dimensional float64 array storage, owned or borrowed."""

    def __init__(self, data: np.ndarray, ownership: Ownership = Ownership.OWNED):
        self.data = data
        self._ownership = ownership

    @classmethod
    def zeros(cls, nrow: int, ncol: int) -> "DenseMatrixStorage":
        return cls(np.zeros((nrow, ncol), dtype=np.float64))

    @property
    def nrow(self) -> int:
        return self.data.shape[0]

    @property
    def ncol(self) -> int:
        return self.data.shape[1]

    @property
    def backend(self) -> Backend:
        return Backend.DENSE

    @property
    def ownership(self) -> Ownership:
        return self._ownership

    def get(self, row: int, col: int) -> float:
        return float(self.data[row, col])

    def set(self, row: int, col: int, value: float) -> "DenseMatrixStorage":
        self.data[row, col] = value
        return self

    def stored(self) -> Iterator[Tuple[int, int, float]]:
        for (row, col), value in np.ndenumerate(self.data):
            yield row, col, float(value)

    def transform(self, func: Callable[[np.ndarray], np.ndarray]) -> None:
        # In place; aliases of a borrowed array observe the update
        self.data[...] = func(self.data)

    def matmul(self, operand: np.ndarray) -> np.ndarray:
        return self.data @ operand

    def copy(self) -> "DenseMatrixStorage":
        return DenseMatrixStorage(self.data.copy(), Ownership.OWNED)

    def to_array(self) -> np.ndarray:
        return self.data.copy()


# =============================================================================
# Diagonal Storage
# =============================================================================

class DiagonalStorage(MatrixStorage):
    """Square matrix storing only its diagonal."""

    def __init__(self, diagonal: np.ndarray):
        self.diagonal = diagonal

    @property
    def nrow(self) -> int:
        return self.diagonal.shape[0]

    @property
    def ncol(self) -> int:
        return self.diagonal.shape[0]

    @property
    def backend(self) -> Backend:
        return Backend.DIAGONAL

    def get(self, row: int, col: int) -> float:
        if row == col:
            return float(self.diagonal[row])
        return 0.0

    def set(self, row: int, col: int, value: float) -> MatrixStorage:
        if row == col:
            self.diagonal[row] = value
            return self

        if default_comparator().is_zero(value):
            return self

        promoted = SparseStorage.from_diagonal(self.diagonal)
        promoted.set(row, col, value)

        logger.debug(
            "Promoted %dx%d diagonal matrix to sparse storage on write at [%d, %d]",
            self.nrow, self.ncol, row, col,
        )
        return promoted

    def stored(self) -> Iterator[Tuple[int, int, float]]:
        for index, value in enumerate(self.diagonal):
            yield index, index, float(value)

    def transform(self, func: Callable[[np.ndarray], np.ndarray]) -> None:
        self.diagonal[...] = func(self.diagonal)

    def matmul(self, operand: np.ndarray) -> np.ndarray:
        if operand.ndim == 1:
            return self.diagonal * operand
        return self.diagonal[:, np.newaxis] * operand

    def copy(self) -> "DiagonalStorage":
        return DiagonalStorage(self.diagonal.copy())

    def to_array(self) -> np.ndarray:
        return np.diag(self.diagonal)


# =============================================================================
# Sparse Storage
# =============================================================================

class SparseStorage(MatrixStorage):
    """General sparse storage backed by ``scipy.sparse.dok_array``."""

    def __init__(self, data: sparse.dok_array):
        self.data = data

    @classmethod
    def zeros(cls, nrow: int, ncol: int) -> "SparseStorage":
        return cls(sparse.dok_array((nrow, ncol), dtype=np.float64))

    @classmethod
    def from_diagonal(cls, diagonal: np.ndarray) -> "SparseStorage":
        """Seed a square sparse store with the non-zero diagonal entries."""
        length = diagonal.shape[0]
        storage = cls.zeros(length, length)
        for index in np.flatnonzero(diagonal):
            storage.data[index, index] = diagonal[index]
        return storage

    @property
    def nrow(self) -> int:
        return self.data.shape[0]

    @property
    def ncol(self) -> int:
        return self.data.shape[1]

    @property
    def backend(self) -> Backend:
        return Backend.SPARSE

    def get(self, row: int, col: int) -> float:
        return float(self.data[row, col])

    def set(self, row: int, col: int, value: float) -> "SparseStorage":
        self.data[row, col] = value
        return self

    def stored(self) -> Iterator[Tuple[int, int, float]]:
        for (row, col), value in sorted(self.data.items()):
            yield int(row), int(col), float(value)

    def transform(self, func: Callable[[np.ndarray], np.ndarray]) -> None:
        for key, value in list(self.data.items()):
            self.data[key] = func(value)

    def matmul(self, operand: np.ndarray) -> np.ndarray:
        return self.data.tocsr() @ operand

    def copy(self) -> "SparseStorage":
        return SparseStorage(self.data.copy())

    def to_array(self) -> np.ndarray:
        return self.data.toarray()
