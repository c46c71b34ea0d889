"""
Singular Value Decomposition

``JamSVD`` factors an ``M x N`` matrix as ``A = U * diag(sigma) * V^T`` with
``numpy.linalg.svd``. With ``K = min(M, N)``, ``U`` is ``M x K`` with
orthonormal columns, ``V`` is ``N x K`` with orthonormal columns, and the
singular values are non-increasing.

The factors are computed on first access and cached for the lifetime of the
decomposition object. They are handed out as read-only views over the cached
arrays, so no caller can change what ``invert()`` and ``rank()`` see.

Example:
    >>> svd = JamSVD.compute(JamMatrix.byrow(2, 2, 4.0, 0.0, 0.0, 2.0))
    >>> svd.singular_values.to_array()
    array([4., 2.])
    >>> svd.invert().to_array()
    array([[0.25, 0.  ],
           [0.  , 0.5 ]])
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Tuple

import numpy as np

from .._config import get_epsilon
from ..matrix._base import MatrixView
from ..matrix._matrix import JamMatrix
from ..matrix._storage import DenseMatrixStorage, Ownership
from ..stat import _stat
from ..vector._base import VectorView

logger = logging.getLogger("jam.linalg")

__all__ = ["JamSVD"]


class JamSVD:
    """
    Singular value decomposition of a matrix.

    Attributes:
        A: The decomposed matrix.
        U: Left singular vectors (columns).
        UT: Transpose of U.
        V: Right singular vectors (columns).
        VT: Transpose of V.
        singular_values: Non-increasing singular values.
    """

    def __init__(self, matrix: MatrixView):
        self._A = matrix
        self._factors: Optional[Tuple[np.ndarray, np.ndarray, np.ndarray]] = None

        self._U: Optional[MatrixView] = None
        self._UT: Optional[MatrixView] = None
        self._V: Optional[MatrixView] = None
        self._VT: Optional[MatrixView] = None
        self._singular_values: Optional[VectorView] = None

    @classmethod
    def compute(cls, matrix: MatrixView) -> "JamSVD":
        """Create the decomposition of a matrix."""
        return cls(matrix)

    # -------------------------------------------------------------------------
    # Lazily Computed Factors
    # -------------------------------------------------------------------------

    def _decompose(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        if self._factors is None:
            logger.debug("Computing SVD of %dx%d matrix", self._A.nrow, self._A.ncol)
            u, s, vt = np.linalg.svd(self._A.to_array(), full_matrices=False)
            self._factors = (_frozen(u), _frozen(s), _frozen(vt))
        return self._factors

    @property
    def A(self) -> MatrixView:
        return self._A

    @property
    def U(self) -> MatrixView:
        if self._U is None:
            self._U = MatrixView.of(self._decompose()[0])
        return self._U

    @property
    def UT(self) -> MatrixView:
        if self._UT is None:
            self._UT = MatrixView.of(self._decompose()[0].T)
        return self._UT

    @property
    def V(self) -> MatrixView:
        if self._V is None:
            self._V = MatrixView.of(self._decompose()[2].T)
        return self._V

    @property
    def VT(self) -> MatrixView:
        if self._VT is None:
            self._VT = MatrixView.of(self._decompose()[2])
        return self._VT

    @property
    def singular_values(self) -> VectorView:
        if self._singular_values is None:
            self._singular_values = VectorView.of(self._decompose()[1])
        return self._singular_values

    # -------------------------------------------------------------------------
    # Inversion
    # -------------------------------------------------------------------------

    def get_singular_value_threshold(self) -> float:
        """
        Singular values at or below this threshold are treated as zero.

        Computed as ``0.5 * sqrt(M + N + 1) * max(sigma) * eps`` following
        Numerical Recipes, 3rd Edition, Section 2.6.
        """
        nrow, ncol = self._A.shape
        wmax = _stat.max(self.singular_values)
        return 0.5 * math.sqrt(nrow + ncol + 1.0) * wmax * get_epsilon()

    def rank(self) -> int:
        """Number of singular values above the threshold."""
        threshold = self.get_singular_value_threshold()
        return int(np.count_nonzero(self._decompose()[1] > threshold))

    def invert(self) -> JamMatrix:
        """
        Compute ``V * diag(1 / sigma) * U^T``, with ``1 / sigma`` replaced by
        zero for singular values at or below the threshold.

        Returns:
            The inverse for a square full-rank matrix, otherwise the
            Moore-Penrose pseudo-inverse (shape ``N x M``)
        """
        u, s, vt = self._decompose()
        threshold = self.get_singular_value_threshold()

        dinv = np.zeros_like(s)
        above = s > threshold
        dinv[above] = 1.0 / s[above]

        return JamMatrix(DenseMatrixStorage(vt.T @ (dinv[:, np.newaxis] * u.T), Ownership.OWNED))


def _frozen(array: np.ndarray) -> np.ndarray:
    """Mark a cached factor read-only; views handed out share it."""
    array.setflags(write=False)
    return array
