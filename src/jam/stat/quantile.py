"""
Quantiles

``QuantileCalculator`` evaluates quantiles of a fixed data set with
``numpy.percentile``. The interpolation method comes from the statistics
configuration; the default ``"weibull"`` places quantile ``p`` at the
(one-based) position ``p * (n + 1)`` of the sorted data, clamped to the
smallest and largest observations.

Valid quantile probabilities lie in the half-open interval ``(0, 1]``.

Example:
    >>> calculator = QuantileCalculator.create([1.0, 2.0, 3.0, 4.0])
    >>> calculator.compute(0.5)
    2.5
    >>> Quantiles.summary([1.0, 2.0, 3.0, 4.0]).values.to_array()
    array([1.25, 2.5 , 3.75])
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .._config import get_config
from ..math.range import DoubleRange
from ..vector._base import VectorView
from ..vector._views import StreamCapture
from ._stat import StatInput, as_array

__all__ = ["QuantileCalculator", "Quantiles"]


# =============================================================================
# Quantile Calculator
# =============================================================================

class QuantileCalculator:
    """Quantile evaluator over a private copy of a data set."""

    QUANTILE_RANGE = DoubleRange.left_open(0.0, 1.0)

    def __init__(self, data: np.ndarray):
        self._data = data

    @classmethod
    def create(cls, data: StatInput) -> "QuantileCalculator":
        """Create a calculator over a copy of the data."""
        return cls(np.array(as_array(data), dtype=np.float64))

    @classmethod
    def validate_quantile(cls, quantile: float) -> float:
        """
        Ensure that a quantile probability lies in ``(0, 1]``.

        Raises:
            JamRangeError: If the probability is outside the range
        """
        return cls.QUANTILE_RANGE.validate("quantile", quantile)

    def compute(self, quantile: float) -> float:
        """
        Evaluate one quantile.

        Args:
            quantile: Probability in ``(0, 1]``

        Returns:
            The quantile value, or NaN for an empty data set

        Raises:
            JamRangeError: If the probability is outside ``(0, 1]``
        """
        self.validate_quantile(quantile)

        if self._data.size == 0:
            return math.nan

        method = get_config().stat.quantile_method
        return float(np.percentile(self._data, 100.0 * quantile, method=method))


# =============================================================================
# Quantile Snapshot
# =============================================================================

@dataclass(frozen=True)
class Quantiles:
    """
    Quantile probabilities and their values for one data set.

    Attributes:
        probs: Read-only vector of probabilities.
        values: Read-only vector of quantile values, parallel to ``probs``.
    """
    probs: VectorView
    values: VectorView

    Q1 = 0.25
    MEDIAN = 0.50
    Q3 = 0.75

    @classmethod
    def compute(cls, data: StatInput, *probs: float) -> "Quantiles":
        """
        Evaluate several quantiles of one data set.

        Raises:
            JamRangeError: If any probability is outside ``(0, 1]``
        """
        calculator = QuantileCalculator.create(data)
        values = [calculator.compute(prob) for prob in probs]
        return cls(StreamCapture(probs), StreamCapture(values))

    @classmethod
    def summary(cls, data: StatInput) -> "Quantiles":
        """First quartile, median and third quartile."""
        return cls.compute(data, cls.Q1, cls.MEDIAN, cls.Q3)
