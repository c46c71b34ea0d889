"""
jam - Vectors, Matrices, Statistics and Decompositions

Storage-polymorphic numeric containers with value semantics:
- Read-only views (VectorView, MatrixView) with derived arithmetic
- Mutable containers (JamVector, JamMatrix) over pluggable storage
- Copy vs. wrap (aliasing) construction
- Diagonal storage that promotes to sparse on off-diagonal writes
- Tolerance-based equality; containers are never hashable
- Statistics (finite-value filtering, quantiles, summaries)
- SVD and eigen decompositions backed by numpy

Modules:
- math: DoubleComparator, DoubleRange
- vector: VectorView, JamVector and views
- matrix: MatrixView, JamMatrix, storage strategies and projections
- stat: Stat calculators, QuantileCalculator, Quantiles, StatSummary
- linalg: JamSVD, JamEigen

Architecture:
    ┌──────────────────────────────────────────────┐
    │         JamVector / JamMatrix (mutable)      │
    ├──────────────────────────────────────────────┤
    │  Backend: DENSE | DIAGONAL | SPARSE          │
    │  Ownership: OWNED | BORROWED                 │
    └──────────────────────────────────────────────┘

Example:
    >>> import numpy as np
    >>> import jam
    >>> from jam.matrix import JamMatrix
    >>>
    >>> # Wrap aliases the caller array
    >>> data = np.eye(3)
    >>> m = JamMatrix.wrap(data)
    >>> m.set(0, 1, 2.0)
    >>> data[0, 1]
    2.0
    >>>
    >>> # Diagonal storage promotes on an off-diagonal write
    >>> d = JamMatrix.identity(3)
    >>> d.set(0, 1, 5.0)
    >>> d.backend
    <Backend.SPARSE: 'sparse'>
"""

__version__ = '0.1.0'

from . import error
from . import math
from . import vector
from . import matrix
from . import stat
from . import linalg

from ._config import (
    JamConfig,
    LinalgConfig,
    NumericConfig,
    StatConfig,
    default_comparator,
    get_config,
    set_tolerance,
)
from .error import (
    DimensionMismatchError,
    DomainError,
    JamError,
    JamFormatError,
    JamIndexError,
    JamRangeError,
    JamTypeError,
    UnsupportedOperationError,
    ZeroDivisorError,
)
from .math import DoubleComparator, DoubleRange
from .vector import JamVector, VectorElement, VectorView
from .matrix import Backend, JamMatrix, MatrixElement, MatrixView, Ownership
from .stat import QuantileCalculator, Quantiles, Stat, StatSummary
from .linalg import JamEigen, JamSVD

__all__ = [
    '__version__',
    # Submodules
    'error',
    'math',
    'vector',
    'matrix',
    'stat',
    'linalg',
    # Configuration
    'JamConfig',
    'NumericConfig',
    'StatConfig',
    'LinalgConfig',
    'get_config',
    'set_tolerance',
    'default_comparator',
    # Errors
    'JamError',
    'JamIndexError',
    'DimensionMismatchError',
    'DomainError',
    'JamRangeError',
    'JamFormatError',
    'JamTypeError',
    'UnsupportedOperationError',
    'ZeroDivisorError',
    # Numerics
    'DoubleComparator',
    'DoubleRange',
    # Vectors
    'VectorView',
    'JamVector',
    'VectorElement',
    # Matrices
    'MatrixView',
    'JamMatrix',
    'MatrixElement',
    'Backend',
    'Ownership',
    # Statistics
    'Stat',
    'QuantileCalculator',
    'Quantiles',
    'StatSummary',
    # Decompositions
    'JamSVD',
    'JamEigen',
]
