"""
jam Matrix Module.

Read-only matrix views, zero-copy projections and the mutable JamMatrix.

Classes:
    MatrixView: Read-only capability interface (nrow, ncol, get + derived ops)
    JamMatrix: Mutable matrix over a dense, diagonal or sparse storage
    ArrayWrapper: Read-only view aliasing a caller array
    RowView / ColumnView / DiagonalView: Vector projections of a matrix
    MatrixElement: Immutable (row, col, value) triple
    Backend: DENSE | DIAGONAL | SPARSE
    Ownership: OWNED | BORROWED

Example:
    >>> from jam.matrix import JamMatrix
    >>> a = JamMatrix.byrow(2, 2, 1.0, 2.0, 3.0, 4.0)
    >>> a.times(JamMatrix.identity(2)).equals_matrix(a)
    True
"""

from jam.matrix._base import MatrixView
from jam.matrix._element import MatrixElement
from jam.matrix._matrix import JamMatrix
from jam.matrix._storage import (
    Backend,
    DenseMatrixStorage,
    DiagonalStorage,
    MatrixStorage,
    Ownership,
    SparseStorage,
)
from jam.matrix._views import ArrayWrapper, ColumnView, DiagonalView, RowView

__all__ = [
    "MatrixView",
    "JamMatrix",
    "ArrayWrapper",
    "RowView",
    "ColumnView",
    "DiagonalView",
    "MatrixElement",
    "Backend",
    "Ownership",
    "MatrixStorage",
    "DenseMatrixStorage",
    "DiagonalStorage",
    "SparseStorage",
]
