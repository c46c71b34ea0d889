"""
Read-only vector views over caller data.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from ..error import DimensionMismatchError
from ._base import VectorView

__all__ = ["ArrayWrapper", "StreamCapture"]


class ArrayWrapper(VectorView):
    """
    Read-only view aliasing a one-dimensional caller array.

    The array is not copied: changes the caller makes to it afterwards are
    visible through the view. The caller must keep the array alive.
    """

    __slots__ = ("_array",)

    def __init__(self, array: np.ndarray):
        if array.ndim != 1:
            raise DimensionMismatchError(f"Expected a one-dimensional array, got shape {array.shape}.")
        self._array = array

    @property
    def length(self) -> int:
        return self._array.shape[0]

    def get(self, index: int) -> float:
        return float(self._array[self.validate_index(index)])

    def to_array(self) -> np.ndarray:
        return np.array(self._array, dtype=np.float64)


class StreamCapture(VectorView):
    """Read-only vector holding a private copy of an iterable's values."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[float]):
        self._values = np.fromiter(values, dtype=np.float64)

    @property
    def length(self) -> int:
        return self._values.shape[0]

    def get(self, index: int) -> float:
        return float(self._values[self.validate_index(index)])

    def to_array(self) -> np.ndarray:
        return self._values.copy()
