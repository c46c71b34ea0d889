"""
Real-valued intervals with open or closed endpoints.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..error import JamRangeError

__all__ = ["DoubleRange"]


@dataclass(frozen=True)
class DoubleRange:
    """
    An interval of the real line.

    Attributes:
        lower: Lower bound (may be -inf).
        upper: Upper bound (may be +inf).
        lower_closed: Whether the lower bound belongs to the interval.
        upper_closed: Whether the upper bound belongs to the interval.

    Example:
        >>> prob = DoubleRange.left_open(0.0, 1.0)   # (0.0, 1.0]
        >>> prob.contains(0.0), prob.contains(1.0)
        (False, True)
    """
    lower: float
    upper: float
    lower_closed: bool = True
    upper_closed: bool = True

    def __post_init__(self):
        if math.isnan(self.lower) or math.isnan(self.upper):
            raise JamRangeError("Range bounds may not be NaN.")
        if self.lower > self.upper:
            raise JamRangeError(f"Invalid range: lower bound {self.lower} exceeds upper bound {self.upper}.")

    @classmethod
    def closed(cls, lower: float, upper: float) -> "DoubleRange":
        """The interval ``[lower, upper]``."""
        return cls(lower, upper, True, True)

    @classmethod
    def open(cls, lower: float, upper: float) -> "DoubleRange":
        """The interval ``(lower, upper)``."""
        return cls(lower, upper, False, False)

    @classmethod
    def left_open(cls, lower: float, upper: float) -> "DoubleRange":
        """The interval ``(lower, upper]``."""
        return cls(lower, upper, False, True)

    @classmethod
    def left_closed(cls, lower: float, upper: float) -> "DoubleRange":
        """The interval ``[lower, upper)``."""
        return cls(lower, upper, True, False)

    def contains(self, value: float) -> bool:
        """Whether a value lies inside this range (NaN never does)."""
        if math.isnan(value):
            return False

        if self.lower_closed:
            above = value >= self.lower
        else:
            above = value > self.lower

        if self.upper_closed:
            below = value <= self.upper
        else:
            below = value < self.upper

        return above and below

    def validate(self, name: str, value: float) -> float:
        """
        Ensure that a named value lies inside this range.

        Raises:
            JamRangeError: If the value is outside the range
        """
        if not self.contains(value):
            raise JamRangeError(f"Invalid {name}: [{value}] is outside {self}.")
        return value

    def __str__(self) -> str:
        left = "[" if self.lower_closed else "("
        right = "]" if self.upper_closed else ")"
        return f"{left}{self.lower}, {self.upper}{right}"
