"""
jam Statistics Module.

Stateless statistics over vectors, arrays and iterables.

Functions:
    max, min, mean, median, sum, norm1, norm2: Univariate statistics
    to_std_dev, to_variance, validate_variance: Variance conversions

Classes:
    Stat: Calculator interface (Stat.MAX, Stat.SUM, ...)
    QuantileCalculator: Quantiles of a fixed data set
    Quantiles: Quantile probabilities and values
    StatSummary: Min, quartiles, mean, standard deviation, max

Example:
    >>> import math
    >>> from jam import stat
    >>> from jam.vector import VectorView
    >>> data = VectorView.of(0.0, 1.0, 2.0, math.nan, -4.0, math.inf, 8.0)
    >>> stat.sum(data), stat.mean(data)
    (7.0, 1.4)
"""

from jam.stat._stat import (
    Stat,
    StreamStat,
    max,
    mean,
    median,
    min,
    norm1,
    norm2,
    sum,
    to_std_dev,
    to_variance,
    validate_variance,
)
from jam.stat.quantile import QuantileCalculator, Quantiles
from jam.stat.summary import StatSummary

__all__ = [
    "Stat",
    "StreamStat",
    "QuantileCalculator",
    "Quantiles",
    "StatSummary",
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
