"""
jam Vector Module.

Read-only vector views and the mutable JamVector container.

Classes:
    VectorView: Read-only capability interface (length + get, with derived ops)
    JamVector: Mutable vector over a storage strategy
    ArrayWrapper: Read-only view aliasing a caller array
    StreamCapture: Read-only view over a captured iterable
    VectorElement: Immutable (index, value) pair
    Ownership: OWNED | BORROWED

Example:
    >>> import numpy as np
    >>> from jam.vector import JamVector
    >>> data = np.array([1.0, 2.0, 3.0])
    >>> alias = JamVector.wrap(data)
    >>> alias.set(0, 10.0)
    >>> data[0]
    10.0
"""

from jam.vector._base import VectorView
from jam.vector._element import VectorElement
from jam.vector._storage import DenseVectorStorage, Ownership, VectorStorage
from jam.vector._vector import JamVector
from jam.vector._views import ArrayWrapper, StreamCapture

__all__ = [
    "VectorView",
    "JamVector",
    "ArrayWrapper",
    "StreamCapture",
    "VectorElement",
    "VectorStorage",
    "DenseVectorStorage",
    "Ownership",
]
