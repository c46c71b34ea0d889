"""
Vector Storage Strategies

A JamVector holds exactly one storage object. Every write goes through
``VectorStorage.set()``, which returns the storage that holds the result;
the vector replaces its handle with the returned object. Dense storage
never changes representation, so it always returns itself.

Ownership:
    - OWNED: The storage allocated its own array (copy construction).
    - BORROWED: The storage aliases a caller-owned array (wrap construction).
      Writes through either handle are visible through the other, and the
      caller keeps the array alive.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

import numpy as np

__all__ = [
    "Ownership",
    "VectorStorage",
    "DenseVectorStorage",
]


# =============================================================================
# Enumerations
# =============================================================================

class Ownership(Enum):
    """Data ownership model.

    Attributes:
        OWNED: Container owns the underlying array.
               Created by: dense(), copy_of(), copy()
        BORROWED: Container aliases an external array.
                  Original owner must keep data alive.
                  Created by: wrap()
    """
    OWNED = "owned"
    BORROWED = "borrowed"


# =============================================================================
# Storage Interface
# =============================================================================

class VectorStorage(ABC):
    """Physical representation of a mutable vector."""

    # Backing array; containers apply in-place numpy arithmetic to it.
    data: np.ndarray

    @property
    @abstractmethod
    def length(self) -> int:
        ...

    @property
    @abstractmethod
    def ownership(self) -> Ownership:
        ...

    @property
    @abstractmethod
    def is_dense(self) -> bool:
        ...

    @abstractmethod
    def get(self, index: int) -> float:
        ...

    @abstractmethod
    def set(self, index: int, value: float) -> "VectorStorage":
        """Assign one element and return the storage now holding the data."""
        ...

    @abstractmethod
    def copy(self) -> "VectorStorage":
        """Return an independent, owned copy of this storage."""
        ...

    @abstractmethod
    def to_array(self) -> np.ndarray:
        """Return a new array holding the elements."""
        ...


# =============================================================================
# Dense Storage
# =============================================================================

class DenseVectorStorage(VectorStorage):
    """
    Contiguous float64 array storage.

    The ``data`` attribute is the backing array itself; in-place numpy
    operations on it are visible through every alias of a borrowed array.
    """

    __slots__ = ("data", "_ownership")

    def __init__(self, data: np.ndarray, ownership: Ownership = Ownership.OWNED):
        self.data = data
        self._ownership = ownership

    @classmethod
    def zeros(cls, length: int) -> "DenseVectorStorage":
        return cls(np.zeros(length, dtype=np.float64))

    @property
    def length(self) -> int:
        return self.data.shape[0]

    @property
    def ownership(self) -> Ownership:
        return self._ownership

    @property
    def is_dense(self) -> bool:
        return True

    def get(self, index: int) -> float:
        return float(self.data[index])

    def set(self, index: int, value: float) -> "DenseVectorStorage":
        self.data[index] = value
        return self

    def copy(self) -> "DenseVectorStorage":
        return DenseVectorStorage(self.data.copy(), Ownership.OWNED)

    def to_array(self) -> np.ndarray:
        return self.data.copy()

    def __repr__(self) -> str:
        return f"DenseVectorStorage(length={self.length}, ownership={self._ownership.value})"
