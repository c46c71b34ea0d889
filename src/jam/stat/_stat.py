"""
Univariate Statistics

Stateless calculators sharing the ``Stat`` interface, plus module-level
shortcuts named after the statistic (``sum``, ``min``, ``max``, ...). The
shortcuts intentionally shadow the builtins inside this module; import the
module (``from jam.stat import _stat``) or use ``jam.stat.sum`` to call them.

Non-finite Filtering:
    Every statistic except the median drops NaN and infinite values before
    aggregating. For the data ``(0, 1, 2, NaN, -4, +Inf, 8)`` the sum is 7.0,
    the mean is 1.4, the maximum is 8.0 and the minimum is -4.0.

    The median sorts a copy with NaN last (as numpy does) and drops only the
    NaN values; infinite values take part in the midpoint.

Empty Input:
    ``sum``, ``norm1`` and ``norm2`` return 0.0; ``max``, ``min``, ``mean``
    and ``median`` return NaN.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Iterable, Union

import numpy as np

from .._config import default_comparator
from ..error import JamRangeError
from ..vector._base import VectorView

__all__ = [
    "Stat",
    "StreamStat",
    "StatInput",
    "as_array",
    "max",
    "min",
    "mean",
    "median",
    "sum",
    "norm1",
    "norm2",
    "to_std_dev",
    "to_variance",
    "validate_variance",
]

StatInput = Union[VectorView, np.ndarray, Iterable[float]]


def as_array(data: StatInput) -> np.ndarray:
    """Materialize statistic input as a float64 array."""
    if isinstance(data, VectorView):
        return data.to_array()
    if isinstance(data, np.ndarray):
        return np.asarray(data, dtype=np.float64).ravel()
    return np.fromiter(data, dtype=np.float64)


# =============================================================================
# Calculator Interface
# =============================================================================

class Stat(ABC):
    """
    A univariate statistic.

    Shared calculators are available as class attributes:
    ``Stat.MAX``, ``Stat.MIN``, ``Stat.MEAN``, ``Stat.MEDIAN``, ``Stat.SUM``,
    ``Stat.NORM1`` and ``Stat.NORM2``.

    Example:
        >>> Stat.SUM.compute(VectorView.of(1.0, 2.0, float("nan")))
        3.0
    """

    MAX: "Stat"
    MIN: "Stat"
    MEAN: "Stat"
    MEDIAN: "Stat"
    SUM: "Stat"
    NORM1: "Stat"
    NORM2: "Stat"

    @abstractmethod
    def compute(self, data: StatInput) -> float:
        """
        Compute the statistic.

        Args:
            data: A VectorView, an ndarray, or any iterable of numbers

        Returns:
            The value of this statistic for the data
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class StreamStat(Stat):
    """Statistic computed over the finite values only."""

    def compute(self, data: StatInput) -> float:
        values = as_array(data)
        return self.compute_finite(values[np.isfinite(values)])

    @abstractmethod
    def compute_finite(self, values: np.ndarray) -> float:
        ...


# =============================================================================
# Concrete Statistics
# =============================================================================

class _Max(StreamStat):
    def compute_finite(self, values: np.ndarray) -> float:
        if values.size == 0:
            return math.nan
        return float(np.max(values))


class _Min(StreamStat):
    def compute_finite(self, values: np.ndarray) -> float:
        if values.size == 0:
            return math.nan
        return float(np.min(values))


class _Mean(StreamStat):
    def compute_finite(self, values: np.ndarray) -> float:
        if values.size == 0:
            return math.nan
        return float(np.sum(values)) / values.size


class _Sum(StreamStat):
    def compute_finite(self, values: np.ndarray) -> float:
        return float(np.sum(values))


class _Norm1(StreamStat):
    """Sum of absolute values."""

    def compute_finite(self, values: np.ndarray) -> float:
        return float(np.sum(np.abs(values)))


class _Norm2(StreamStat):
    """Square root of the sum of squares."""

    def compute_finite(self, values: np.ndarray) -> float:
        return float(np.linalg.norm(values))


class _Median(Stat):
    def compute(self, data: StatInput) -> float:
        ordered = np.sort(as_array(data))

        # NaN sorts last
        upper = ordered.shape[0] - 1
        while upper >= 0 and math.isnan(ordered[upper]):
            upper -= 1

        if upper < 0:
            return math.nan

        mid = upper // 2
        if upper % 2 == 0:
            return float(ordered[mid])
        return 0.5 * (float(ordered[mid]) + float(ordered[mid + 1]))


Stat.MAX = _Max()
Stat.MIN = _Min()
Stat.MEAN = _Mean()
Stat.MEDIAN = _Median()
Stat.SUM = _Sum()
Stat.NORM1 = _Norm1()
Stat.NORM2 = _Norm2()


# =============================================================================
# Convenience Functions
# =============================================================================

def max(data: StatInput) -> float:
    """Largest finite value (NaN if there is none)."""
    return Stat.MAX.compute(data)


def min(data: StatInput) -> float:
    """Smallest finite value (NaN if there is none)."""
    return Stat.MIN.compute(data)


def mean(data: StatInput) -> float:
    """Mean of the finite values (NaN if there are none)."""
    return Stat.MEAN.compute(data)


def median(data: StatInput) -> float:
    """Median of the non-NaN values (NaN if there are none)."""
    return Stat.MEDIAN.compute(data)


def sum(data: StatInput) -> float:
    """Sum of the finite values."""
    return Stat.SUM.compute(data)


def norm1(data: StatInput) -> float:
    """Sum of the absolute finite values."""
    return Stat.NORM1.compute(data)


def norm2(data: StatInput) -> float:
    """Euclidean norm of the finite values."""
    return Stat.NORM2.compute(data)


def to_std_dev(variance: float) -> float:
    """
    Convert a variance to a standard deviation.

    Raises:
        JamRangeError: If the variance is negative
    """
    validate_variance(variance)

    # Negative within tolerance
    if variance < 0.0:
        return 0.0

    return math.sqrt(variance)


def to_variance(std_dev: float) -> float:
    """
    Convert a standard deviation to a variance.

    Raises:
        JamRangeError: If the standard deviation is negative
    """
    validate_variance(std_dev)
    return std_dev * std_dev


def validate_variance(variance: float) -> None:
    if default_comparator().is_negative(variance):
        raise JamRangeError(f"Negative variance: [{variance}].")
