"""
Summary statistics of a data set.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from . import _stat
from ._stat import StatInput, as_array
from .quantile import QuantileCalculator, Quantiles

__all__ = ["StatSummary"]


@dataclass(frozen=True)
class StatSummary:
    """
    Minimum, quartiles, mean, standard deviation and maximum.

    Only finite values contribute. ``std_dev`` is the sample standard
    deviation and is NaN unless at least two finite values are present.
    ``StatSummary.EMPTY`` (every field NaN) is returned when there are no
    finite values at all.

    Example:
        >>> s = StatSummary.compute([1.0, 2.0, 3.0, 4.0, float("nan")])
        >>> s.min, s.median, s.max
        (1.0, 2.5, 4.0)
    """
    min: float
    Q1: float
    median: float
    mean: float
    std_dev: float
    Q3: float
    max: float

    EMPTY: ClassVar["StatSummary"]

    @classmethod
    def compute(cls, data: StatInput) -> "StatSummary":
        values = as_array(data)
        values = values[np.isfinite(values)]

        count = values.size
        if count < 1:
            return cls.EMPTY

        mean = float(np.sum(values)) / count

        std_dev = math.nan
        if count > 1:
            std_dev = _stat.norm2(values - mean) / math.sqrt(count - 1)

        calculator = QuantileCalculator.create(values)

        return cls(
            min=float(np.min(values)),
            Q1=calculator.compute(Quantiles.Q1),
            median=calculator.compute(Quantiles.MEDIAN),
            mean=mean,
            std_dev=std_dev,
            Q3=calculator.compute(Quantiles.Q3),
            max=float(np.max(values)),
        )

    @property
    def variance(self) -> float:
        return _stat.to_variance(self.std_dev)


StatSummary.EMPTY = StatSummary(
    min=math.nan,
    Q1=math.nan,
    median=math.nan,
    mean=math.nan,
    std_dev=math.nan,
    Q3=math.nan,
    max=math.nan,
)
