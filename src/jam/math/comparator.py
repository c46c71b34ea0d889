"""
Tolerance-based floating-point comparison.

As in numpy's sort order, NaN is considered equal to
itself and greater than every other value, including +inf. The sign and
zero predicates (``is_positive``, ``is_zero``, ...) return False for NaN.
+inf equals itself and exceeds all finite values; -inf equals itself and
is less than all other values. The tolerance applies only when both
operands are finite.
"""

from __future__ import annotations

import functools
import math
from typing import Iterable, Sequence

import numpy as np

from ..error import JamRangeError

__all__ = ["DoubleComparator", "compare", "epsilon"]


def epsilon() -> float:
    """Machine precision for IEEE double values."""
    return float(np.finfo(np.float64).eps)


def _compare_nonfinite(x: float, y: float) -> int:
    x_nan = math.isnan(x)
    y_nan = math.isnan(y)

    if x_nan and y_nan:
        return 0
    if x_nan:
        return 1
    if y_nan:
        return -1
    if x < y:
        return -1
    if x > y:
        return 1
    return 0


def compare(x: float, y: float, tolerance: float) -> int:
    """Three-way comparison of two values with a fixed tolerance."""
    if math.isfinite(x) and math.isfinite(y):
        diff = x - y
        if diff < -tolerance:
            return -1
        if diff > tolerance:
            return 1
        return 0

    # Tolerance does not apply with NaN and infinite values
    return _compare_nonfinite(x, y)


class DoubleComparator:
    """
    Compares floating-point numbers with allowance for a finite precision.

    Attributes:
        tolerance: Maximum absolute difference for two finite values to be
            considered equal.

    Example:
        >>> cmp = DoubleComparator(1e-8)
        >>> cmp.equals(1.0, 1.0 + 1e-10)
        True
        >>> cmp.LT(1.0, 1.0 + 1e-10)
        False
    """

    __slots__ = ("_tolerance",)

    # Order-of-magnitude estimate for the floating-point precision.
    EPSILON = 2.2e-16

    # Default tolerance for quantities of order one.
    DEFAULT_TOLERANCE = 1.0e-12

    DEFAULT: "DoubleComparator"

    def __init__(self, tolerance: float):
        if not tolerance > 0.0:
            raise JamRangeError(f"Tolerance must be positive, got {tolerance}")
        self._tolerance = float(tolerance)

    @property
    def tolerance(self) -> float:
        """Floating-point tolerance for this comparator."""
        return self._tolerance

    @staticmethod
    def epsilon() -> float:
        """Machine precision for IEEE double values."""
        return epsilon()

    # -------------------------------------------------------------------------
    # Three-way comparison
    # -------------------------------------------------------------------------

    def compare(self, x: float, y: float) -> int:
        """Return -1, 0 or +1 as x is less than, equal to or greater than y."""
        return compare(x, y, self._tolerance)

    def sign(self, x: float) -> int:
        """Return -1, 0 or +1 by the sign of x (zero within tolerance)."""
        if self.is_negative(x):
            return -1
        if self.is_positive(x):
            return 1
        return 0

    # -------------------------------------------------------------------------
    # Binary predicates
    # -------------------------------------------------------------------------

    def equals(self, x: float, y: float) -> bool:
        return self.compare(x, y) == 0

    def EQ(self, x: float, y: float) -> bool:
        return self.compare(x, y) == 0

    def NE(self, x: float, y: float) -> bool:
        return self.compare(x, y) != 0

    def LT(self, x: float, y: float) -> bool:
        return self.compare(x, y) < 0

    def LE(self, x: float, y: float) -> bool:
        return self.compare(x, y) <= 0

    def GT(self, x: float, y: float) -> bool:
        return self.compare(x, y) > 0

    def GE(self, x: float, y: float) -> bool:
        return self.compare(x, y) >= 0

    def equals_array(self, x: Sequence[float], y: Sequence[float]) -> bool:
        """Elementwise equality of two sequences of the same length."""
        if len(x) != len(y):
            return False
        return all(self.equals(a, b) for a, b in zip(x, y))

    # -------------------------------------------------------------------------
    # Unary predicates (all False for NaN)
    # -------------------------------------------------------------------------

    def is_zero(self, x: float) -> bool:
        return not math.isnan(x) and self.compare(x, 0.0) == 0

    def is_non_zero(self, x: float) -> bool:
        return not math.isnan(x) and self.compare(x, 0.0) != 0

    def is_unity(self, x: float) -> bool:
        return not math.isnan(x) and self.compare(x, 1.0) == 0

    def is_positive(self, x: float) -> bool:
        return not math.isnan(x) and self.compare(x, 0.0) > 0

    def is_negative(self, x: float) -> bool:
        return not math.isnan(x) and self.compare(x, 0.0) < 0

    def is_non_positive(self, x: float) -> bool:
        return not math.isnan(x) and self.compare(x, 0.0) <= 0

    def is_non_negative(self, x: float) -> bool:
        return not math.isnan(x) and self.compare(x, 0.0) >= 0

    def is_integer(self, x: float) -> bool:
        return math.isfinite(x) and self.equals(x, float(round(x)))

    # -------------------------------------------------------------------------
    # Sequence predicates
    # -------------------------------------------------------------------------

    def is_increasing(self, values: Iterable[float]) -> bool:
        x = list(values)
        return all(self.GT(x[k], x[k - 1]) for k in range(1, len(x)))

    def is_non_decreasing(self, values: Iterable[float]) -> bool:
        x = list(values)
        return all(self.GE(x[k], x[k - 1]) for k in range(1, len(x)))

    def is_decreasing(self, values: Iterable[float]) -> bool:
        x = list(values)
        return all(self.LT(x[k], x[k - 1]) for k in range(1, len(x)))

    def is_non_increasing(self, values: Iterable[float]) -> bool:
        x = list(values)
        return all(self.LE(x[k], x[k - 1]) for k in range(1, len(x)))

    # -------------------------------------------------------------------------
    # Comparator protocol
    # -------------------------------------------------------------------------

    def key(self):
        """Return a sort key implementing this comparator's ordering."""
        return functools.cmp_to_key(self.compare)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DoubleComparator):
            return NotImplemented
        return self._tolerance == other._tolerance

    def __hash__(self) -> int:
        return hash(self._tolerance)

    def __repr__(self) -> str:
        return f"DoubleComparator(tolerance={self._tolerance})"


DoubleComparator.DEFAULT = DoubleComparator(DoubleComparator.DEFAULT_TOLERANCE)
