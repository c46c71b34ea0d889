"""
Eigenvalue Decomposition

``JamEigen`` decomposes square matrices whose eigenvalues are all real.
Symmetric matrices are decomposed with ``numpy.linalg.eigh`` and their
eigenvalues are returned in non-increasing order with unit-norm eigenvectors;
other matrices use ``numpy.linalg.eig``. Eigenvectors are the columns of
``view_vectors()``. Values and vectors are read-only views of the cached
result.

Self-check:
    After decomposition ``A v = lambda v`` is asserted for every pair (and,
    for symmetric input, ordering and unit norms). The check is controlled by
    ``LinalgConfig.check_decompositions`` (or ``JAM_NO_DECOMP_CHECKS``) and
    uses ``LinalgConfig.check_tolerance``.

Example:
    >>> transition = JamMatrix.byrow(2, 2, 0.9, 0.5, 0.1, 0.5)   # column-stochastic
    >>> eigen = JamEigen.compute(transition)
    >>> eigen.has_unique_unit_eigenvalue()
    True
    >>> eigen.find_unique_unit_eigenvector(normalize=True).to_array()
    array([0.83333333, 0.16666667])
"""

from __future__ import annotations

import logging
from typing import List

import numpy as np

from .._config import default_comparator, get_config
from ..error import DomainError
from ..math.comparator import DoubleComparator
from ..matrix._base import MatrixView
from ..stat import _stat
from ..vector._base import VectorView
from ..vector._vector import JamVector
from .svd import _frozen

logger = logging.getLogger("jam.linalg")

__all__ = ["JamEigen"]


class JamEigen:
    """Eigenvalues and eigenvectors of a square matrix with real spectrum."""

    def __init__(self, matrix: MatrixView):
        matrix.validate_square()

        array = matrix.to_array()
        symmetric = matrix.is_symmetric()

        logger.debug(
            "Computing eigen decomposition of %dx%d %s matrix",
            matrix.nrow, matrix.ncol, "symmetric" if symmetric else "general",
        )

        if symmetric:
            values, vectors = np.linalg.eigh(array)
            # eigh returns ascending order
            values = values[::-1].copy()
            vectors = vectors[:, ::-1].copy()
        else:
            values, vectors = np.linalg.eig(array)
            if np.iscomplexobj(values):
                raise DomainError("Matrix has complex eigenvalues.")

        self._values = VectorView.of(_frozen(np.ascontiguousarray(values, dtype=np.float64)))
        self._vectors = MatrixView.of(_frozen(np.ascontiguousarray(vectors, dtype=np.float64)))

        linalg = get_config().linalg
        if linalg.check_decompositions:
            comparator = DoubleComparator(linalg.check_tolerance)
            assert self._is_valid(matrix, symmetric, comparator), "Invalid eigen decomposition."

    @classmethod
    def compute(cls, matrix: MatrixView) -> "JamEigen":
        """
        Decompose a square matrix.

        Raises:
            DomainError: If the matrix is not square or has complex eigenvalues
        """
        return cls(matrix)

    def _is_valid(self, matrix: MatrixView, symmetric: bool, comparator: DoubleComparator) -> bool:
        # A v = lambda v for every pair
        for k in range(self._values.length):
            vector = self._vectors.view_column(k)
            actual = matrix.times(vector)
            expected = vector.times(self._values.get(k))
            if not actual.equals_vector(expected, comparator):
                return False

        if not symmetric:
            return True

        if not comparator.is_non_increasing(self._values):
            return False

        for k in range(self._vectors.ncol):
            if comparator.NE(1.0, _stat.norm2(self._vectors.view_column(k))):
                return False

        return True

    # -------------------------------------------------------------------------
    # Determinant
    # -------------------------------------------------------------------------

    def det(self) -> float:
        """Product of the eigenvalues."""
        return float(np.prod(self._values.to_array()))

    def logdet(self) -> float:
        """Sum of ``log(|lambda|)``; avoids the overflow of ``det()``."""
        return float(np.sum(np.log(np.abs(self._values.to_array()))))

    def sgndet(self) -> float:
        """Product of the eigenvalue signs."""
        return float(np.prod(np.sign(self._values.to_array())))

    # -------------------------------------------------------------------------
    # Unit Eigenvalues
    # -------------------------------------------------------------------------

    def count_unit_eigenvalues(self) -> int:
        return len(self.get_unit_eigenvalues())

    def get_unit_eigenvalues(self) -> List[int]:
        """Indexes of the eigenvalues equal to 1.0 within the default tolerance."""
        comparator = default_comparator()
        return [
            index for index in range(self._values.length)
            if comparator.EQ(self._values.get(index), 1.0)
        ]

    def has_unique_unit_eigenvalue(self) -> bool:
        return self.count_unit_eigenvalues() == 1

    def find_unique_unit_eigenvector(self, normalize: bool = False) -> JamVector:
        """
        Return a copy of the eigenvector for the unique unit eigenvalue.

        Args:
            normalize: Rescale the copy so that its elements sum to one

        Raises:
            DomainError: Unless exactly one eigenvalue equals 1.0
        """
        indexes = self.get_unit_eigenvalues()
        if len(indexes) != 1:
            raise DomainError(
                f"Eigen decomposition does not have a unique unit eigenvalue (found {len(indexes)})."
            )

        result = JamVector.copy_of(self.view_vector(indexes[0]))
        if normalize:
            result.normalize()
        return result

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def get_value(self, index: int) -> float:
        return self._values.get(index)

    def view_values(self) -> VectorView:
        return self._values

    def view_vector(self, index: int) -> VectorView:
        """Eigenvector for the eigenvalue at ``index`` (a column view)."""
        return self._vectors.view_column(index)

    def view_vectors(self) -> MatrixView:
        return self._vectors

    def __repr__(self) -> str:
        return f"JamEigen(values={self._values.to_array().tolist()})"
