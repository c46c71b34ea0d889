"""
jam Math Module.

Floating-point comparison with a finite tolerance and real intervals.

Example:
    >>> from jam.math import DoubleComparator, DoubleRange
    >>> DoubleComparator.DEFAULT.is_zero(1e-14)
    True
    >>> DoubleRange.left_open(0.0, 1.0).contains(0.0)
    False
"""

from jam.math.comparator import DoubleComparator, compare, epsilon
from jam.math.range import DoubleRange

__all__ = [
    "DoubleComparator",
    "DoubleRange",
    "compare",
    "epsilon",
]
