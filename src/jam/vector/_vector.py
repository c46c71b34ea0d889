"""
Mutable Vector Container

``JamVector`` owns a single storage strategy and exposes in-place mutation.
Construction states ownership explicitly:

    - ``copy_of()``, ``dense()``, ``ones()``, ``rep()``, ``parse()``:
      the vector owns an independent array.
    - ``wrap()``: the vector aliases a caller array; writes through either
      handle are visible through the other.

In-place operations return ``self`` so they can be chained. Operand lengths
are validated before any element is modified.

Example:
    >>> x = JamVector.copy_of([1.0, 2.0, 3.0])
    >>> y = JamVector.ones(3)
    >>> x.daxpy(2.0, y).to_array()
    array([3., 4., 5.])
    >>> x.normalize().to_array()
    array([0.25      , 0.33333333, 0.41666667])
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Union

import numpy as np

from .._config import default_comparator
from ..error import (
    DimensionMismatchError,
    JamFormatError,
    JamTypeError,
    UnsupportedOperationError,
    ZeroDivisorError,
    check_length,
)
from ._base import VectorOperand, VectorView, operand_array
from ._storage import DenseVectorStorage, Ownership, VectorStorage

__all__ = ["JamVector"]

# Decimal or scientific notation, plus NaN and (signed) Infinity
_NUMERIC_TOKEN = re.compile(r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|Infinity|NaN)", re.ASCII)


class JamVector(VectorView):
    """
    Mutable vector of float64 values.

    Attributes:
        length: Number of elements.
        ownership: Whether the backing array is owned or borrowed.
        is_dense: Whether the storage is a contiguous dense array.
    """

    def __init__(self, storage: VectorStorage):
        self._storage = storage

    # =========================================================================
    # Factory Methods
    # =========================================================================

    @classmethod
    def dense(cls, length: int) -> "JamVector":
        """Create a zero-filled vector."""
        check_length(length, "vector length")
        return cls(DenseVectorStorage.zeros(length))

    @classmethod
    def ones(cls, length: int) -> "JamVector":
        return cls.rep(1.0, length)

    @classmethod
    def rep(cls, value: float, length: int) -> "JamVector":
        """Create a vector with every element equal to ``value``."""
        check_length(length, "vector length")
        return cls(DenseVectorStorage(np.full(length, value, dtype=np.float64)))

    @classmethod
    def copy_of(cls, source: Union[VectorView, np.ndarray, Iterable[float]]) -> "JamVector":
        """
        Create a vector holding an independent copy of the source values.

        Args:
            source: A vector view, an array, or any iterable of numbers

        Returns:
            New owned vector; later changes to the source are not visible
        """
        if isinstance(source, VectorView):
            data = source.to_array()
        elif isinstance(source, np.ndarray):
            if source.ndim != 1:
                raise DimensionMismatchError(f"Expected a one-dimensional array, got shape {source.shape}.")
            data = np.array(source, dtype=np.float64)
        else:
            data = np.fromiter(source, dtype=np.float64)

        return cls(DenseVectorStorage(data, Ownership.OWNED))

    @classmethod
    def wrap(cls, array: np.ndarray) -> "JamVector":
        """
        Create a vector that aliases a caller array.

        Writes through the vector change ``array`` and vice versa. The caller
        must keep the array alive for the lifetime of the vector.

        Raises:
            JamTypeError: If ``array`` is not a float64 ndarray
            DimensionMismatchError: If ``array`` is not one-dimensional
        """
        if not isinstance(array, np.ndarray) or array.dtype != np.float64:
            raise JamTypeError("Only float64 numpy arrays may be wrapped.")
        if array.ndim != 1:
            raise DimensionMismatchError(f"Expected a one-dimensional array, got shape {array.shape}.")

        return cls(DenseVectorStorage(array, Ownership.BORROWED))

    @classmethod
    def parse(cls, line: str, delimiter: str = ",") -> "JamVector":
        """
        Parse a vector from delimited numeric text.

        Surrounding whitespace is ignored for every token; an empty line
        yields an empty vector.

        Raises:
            JamFormatError: If any token is not a number
        """
        if not line.strip():
            return cls.dense(0)

        tokens = line.split(delimiter)
        values = np.empty(len(tokens), dtype=np.float64)

        for index, token in enumerate(tokens):
            token = token.strip()
            if not _NUMERIC_TOKEN.fullmatch(token):
                raise JamFormatError(f"Invalid numeric token: [{token}].")
            values[index] = float(token)

        return cls(DenseVectorStorage(values))

    @classmethod
    def parse_csv(cls, line: str) -> "JamVector":
        return cls.parse(line, ",")

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def length(self) -> int:
        return self._storage.length

    @property
    def ownership(self) -> Ownership:
        return self._storage.ownership

    @property
    def is_dense(self) -> bool:
        return self._storage.is_dense

    # =========================================================================
    # Element Access
    # =========================================================================

    def get(self, index: int) -> float:
        return self._storage.get(self.validate_index(index))

    def set(self, index: int, value: float) -> None:
        """Assign one element; the storage handle is replaced if it changes."""
        self._storage = self._storage.set(self.validate_index(index), float(value))

    def to_array(self) -> np.ndarray:
        return self._storage.to_array()

    def copy(self) -> "JamVector":
        """Return an independent, owned copy."""
        return JamVector(self._storage.copy())

    # =========================================================================
    # In-place Arithmetic
    # =========================================================================

    def add(self, operand: Union[float, VectorOperand]) -> "JamVector":
        """Add a scalar to every element, or another vector elementwise."""
        if np.isscalar(operand):
            self._storage.data += operand
        else:
            self.validate_operand(operand)
            self._storage.data += operand_array(operand)
        return self

    def subtract(self, operand: Union[float, VectorOperand]) -> "JamVector":
        """Subtract a scalar from every element, or another vector elementwise."""
        if np.isscalar(operand):
            self._storage.data -= operand
        else:
            self.validate_operand(operand)
            self._storage.data -= operand_array(operand)
        return self

    def multiply(self, scalar: float) -> "JamVector":
        self._storage.data *= scalar
        return self

    def divide(self, scalar: float) -> "JamVector":
        self._storage.data /= scalar
        return self

    def daxpy(self, scalar: float, that: VectorOperand) -> "JamVector":
        """
        Compute ``this[i] = this[i] + scalar * that[i]`` for every element.

        Raises:
            DimensionMismatchError: If the lengths differ (nothing is modified)
        """
        self.validate_operand(that)
        self._storage.data += scalar * operand_array(that)
        return self

    def normalize(self) -> "JamVector":
        """
        Rescale so that the (finite) elements sum to one.

        Raises:
            ZeroDivisorError: If the sum is zero within tolerance
        """
        from ..stat import _stat

        total = _stat.sum(self)
        if default_comparator().is_zero(total):
            raise ZeroDivisorError("Vector sum is zero.")
        return self.divide(total)

    def unitize(self) -> "JamVector":
        """
        Rescale to unit Euclidean norm.

        Raises:
            ZeroDivisorError: If the norm is zero within tolerance
        """
        from ..stat import _stat

        norm = _stat.norm2(self)
        if default_comparator().is_zero(norm):
            raise ZeroDivisorError("Vector norm is zero.")
        return self.divide(norm)

    # =========================================================================
    # Equality
    # =========================================================================

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, VectorView):
            return NotImplemented
        return self.equals_vector(other)

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        raise UnsupportedOperationError("Vectors are mutable and may not be hashed.")

    def __repr__(self) -> str:
        return (
            f"JamVector(length={self.length}, ownership={self.ownership.value}, "
            f"values={np.array2string(self.to_array(), separator=', ')})"
        )
