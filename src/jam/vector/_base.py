"""
Vector View Base Class

This module defines ``VectorView``, the read-only capability interface shared by
every vector in jam. Implementations supply only ``length`` and ``get()``;
everything else (tolerance equality, arithmetic producing new vectors,
streaming, materialization) is derived from those two.

Type Hierarchy:

    VectorView (ABC)
    ├── JamVector     - Mutable container over a storage strategy
    ├── ArrayWrapper  - Read-only alias of a caller array
    ├── StreamCapture - Read-only copy of an iterable
    └── RowView / ColumnView / DiagonalView - Projections of a matrix

Indexing:
    ``get(index)`` is defined for ``0 <= index < length``. Negative indexes
    are errors; there is no Python-style wrap-around.

Example:

    >>> v = VectorView.of(1.0, 2.0, 3.0)
    >>> v.length
    3
    >>> v.plus(1.0).to_array()
    array([2., 3., 4.])
    >>> v.dot(v)
    14.0
"""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Iterator, Optional, Sequence, Union

import numpy as np

from .._config import default_comparator
from ..error import DimensionMismatchError, check_index

if TYPE_CHECKING:
    from ..math.comparator import DoubleComparator
    from ._element import VectorElement
    from ._vector import JamVector

__all__ = ["VectorView", "VectorOperand"]


class VectorView(ABC):
    """
    Read-only vector of float64 values.

    Required (subclasses must implement):
        length: Number of elements, fixed for the lifetime of the view.
        get(index): Element at a valid index.

    Derived:
        equals_vector, equals_array, plus, minus, times, dot,
        stream_values, stream_elements, stream_non_zero, to_array,
        validate_operand, validate_index
    """

    # =========================================================================
    # Abstract Interface
    # =========================================================================

    @property
    @abstractmethod
    def length(self) -> int:
        """Number of elements."""
        ...

    @abstractmethod
    def get(self, index: int) -> float:
        """
        Return the element at an index.

        Raises:
            JamIndexError: If the index is outside ``[0, length)``
        """
        ...

    # =========================================================================
    # Factories
    # =========================================================================

    @staticmethod
    def of(*values: Any) -> "VectorView":
        """
        Create a read-only view.

        A single ndarray is wrapped without copying, so later changes to the
        array are visible through the view. A single non-scalar iterable
        (list, generator, ...) is captured into a private array. Otherwise
        the scalar arguments themselves become the elements.

        Example:
            >>> VectorView.of(0.0, 1.0, 2.0).length
            3
            >>> VectorView.of(x * x for x in range(4)).to_array()
            array([0., 1., 4., 9.])
        """
        from ._views import ArrayWrapper, StreamCapture

        if len(values) == 1:
            source = values[0]
            if isinstance(source, np.ndarray):
                return ArrayWrapper(source)
            if not np.isscalar(source):
                return StreamCapture(source)

        return ArrayWrapper(np.array(values, dtype=np.float64))

    # =========================================================================
    # Validation
    # =========================================================================

    def validate_index(self, index: int) -> int:
        return check_index(index, self.length, "element")

    def validate_operand(self, that: "VectorOperand") -> "VectorOperand":
        """
        Ensure that another vector has the same length as this one.

        Raises:
            DimensionMismatchError: If the lengths differ
        """
        that_length = that.length if isinstance(that, VectorView) else len(that)
        if that_length != self.length:
            raise DimensionMismatchError(
                f"Vector length mismatch: [{self.length}] != [{that_length}]."
            )
        return that

    # =========================================================================
    # Equality
    # =========================================================================

    def equals_vector(self, that: "VectorView", comparator: Optional["DoubleComparator"] = None) -> bool:
        """
        Shape-then-elementwise equality within a tolerance.

        Args:
            that: Vector to compare against
            comparator: Tolerance comparator; the configured default if None

        Returns:
            True if the lengths agree and every element pair is equal within
            tolerance
        """
        if comparator is None:
            comparator = default_comparator()

        if self.length != that.length:
            return False

        for index in range(self.length):
            if not comparator.equals(self.get(index), that.get(index)):
                return False

        return True

    def equals_array(self, values: Sequence[float], comparator: Optional["DoubleComparator"] = None) -> bool:
        """Elementwise equality with a plain array within a tolerance."""
        if comparator is None:
            comparator = default_comparator()

        if self.length != len(values):
            return False

        for index in range(self.length):
            if not comparator.equals(self.get(index), float(values[index])):
                return False

        return True

    # =========================================================================
    # Arithmetic Producing New Vectors
    # =========================================================================

    def plus(self, operand: Union[float, "VectorOperand"]) -> "JamVector":
        """Return a new vector ``this + operand`` (scalar or elementwise)."""
        from ._vector import JamVector
        return JamVector.copy_of(self).add(operand)

    def minus(self, operand: Union[float, "VectorOperand"]) -> "JamVector":
        """Return a new vector ``this - operand`` (scalar or elementwise)."""
        from ._vector import JamVector
        return JamVector.copy_of(self).subtract(operand)

    def times(self, scalar: float) -> "JamVector":
        """Return a new vector ``scalar * this``."""
        from ._vector import JamVector
        return JamVector.copy_of(self).multiply(scalar)

    def dot(self, that: "VectorOperand") -> float:
        """
        Inner product with another vector of the same length.

        Raises:
            DimensionMismatchError: If the lengths differ
        """
        self.validate_operand(that)
        return float(np.dot(self.to_array(), operand_array(that)))

    # =========================================================================
    # Streaming and Materialization
    # =========================================================================

    def stream_values(self) -> Iterator[float]:
        for index in range(self.length):
            yield self.get(index)

    def stream_elements(self) -> Iterator["VectorElement"]:
        from ._element import VectorElement
        for index in range(self.length):
            yield VectorElement(index, self.get(index))

    def stream_non_zero(self) -> Iterator["VectorElement"]:
        """Elements that are non-zero under the default comparator."""
        return (element for element in self.stream_elements() if element.is_non_zero())

    def to_array(self) -> np.ndarray:
        """Return the elements in a new array owned by the caller."""
        return np.fromiter(self.stream_values(), dtype=np.float64, count=self.length)

    # =========================================================================
    # Python Protocol
    # =========================================================================

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, index: int) -> float:
        return self.get(operator.index(index))

    def __iter__(self) -> Iterator[float]:
        return self.stream_values()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({np.array2string(self.to_array(), separator=', ')})"


VectorOperand = Union[VectorView, np.ndarray, Sequence[float]]


def operand_array(that: VectorOperand) -> np.ndarray:
    """Materialize a vector operand as a float64 array (no copy for arrays)."""
    if isinstance(that, VectorView):
        return that.to_array()
    return np.asarray(that, dtype=np.float64)
