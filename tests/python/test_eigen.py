"""
Tests for the eigenvalue decomposition.
"""

import math

import numpy as np
import pytest

from jam import DoubleComparator, LinalgConfig, get_config
from jam.error import DomainError
from jam.linalg import JamEigen
from jam.matrix import JamMatrix, MatrixView


@pytest.fixture
def transition():
    """Column-stochastic transition matrix with stationary vector (5/6, 1/6)."""
    return JamMatrix.byrow(2, 2, 0.9, 0.5, 0.1, 0.5)


class TestSymmetric:
    """Test decomposition of symmetric matrices."""

    def test_values_non_increasing(self, symmetric_array):
        """Test the ordering of the eigenvalues."""
        eigen = JamEigen.compute(MatrixView.of(symmetric_array))
        values = eigen.view_values()
        assert values.length == 3
        assert DoubleComparator.DEFAULT.is_non_increasing(values)
        np.testing.assert_allclose(
            values.to_array(), np.sort(np.linalg.eigvalsh(symmetric_array))[::-1]
        )

    def test_unit_norm_vectors(self, symmetric_array):
        """Test that eigenvectors have unit length."""
        eigen = JamEigen.compute(MatrixView.of(symmetric_array))
        for k in range(3):
            assert np.linalg.norm(eigen.view_vector(k).to_array()) == pytest.approx(1.0)

    def test_eigen_equation(self, symmetric_array):
        """Test A v = lambda v for every pair."""
        a = MatrixView.of(symmetric_array)
        eigen = JamEigen.compute(a)
        comparator = DoubleComparator(1.0e-10)
        for k in range(3):
            v = eigen.view_vector(k)
            assert a.times(v).equals_vector(v.times(eigen.get_value(k)), comparator)

    def test_diagonal_storage(self):
        """Test a matrix held in diagonal storage."""
        eigen = JamEigen.compute(JamMatrix.diag([1.0, 3.0, 2.0]))
        assert eigen.view_values().equals_array([3.0, 2.0, 1.0])
        assert eigen.view_vectors().shape == (3, 3)


class TestGeneral:
    """Test decomposition of non-symmetric matrices."""

    def test_eigen_equation(self, square_array):
        """Test A v = lambda v for a non-symmetric matrix."""
        a = MatrixView.of(square_array)
        eigen = JamEigen.compute(a)
        comparator = DoubleComparator(1.0e-9)
        for k in range(3):
            v = eigen.view_vector(k)
            assert a.times(v).equals_vector(v.times(eigen.get_value(k)), comparator)

    def test_non_square(self):
        """Test that non-square matrices are rejected."""
        with pytest.raises(DomainError):
            JamEigen.compute(JamMatrix.dense(2, 3))

    def test_complex_spectrum(self):
        """Test that complex eigenvalues are rejected."""
        rotation = JamMatrix.byrow(2, 2, 0.0, -1.0, 1.0, 0.0)
        with pytest.raises(DomainError, match="complex"):
            JamEigen.compute(rotation)


class TestDeterminant:
    """Test determinants from the eigenvalues."""

    def test_det(self, square_array):
        """Test det, logdet and sgndet against numpy."""
        eigen = JamEigen.compute(MatrixView.of(square_array))
        assert eigen.det() == pytest.approx(np.linalg.det(square_array))
        assert eigen.det() == pytest.approx(-3.0)
        assert eigen.logdet() == pytest.approx(math.log(3.0))
        assert eigen.sgndet() == -1.0

    def test_positive_definite(self, symmetric_array):
        """Test a positive definite matrix."""
        eigen = JamEigen.compute(MatrixView.of(symmetric_array))
        sign, logdet = np.linalg.slogdet(symmetric_array)
        assert eigen.sgndet() == sign
        assert eigen.logdet() == pytest.approx(logdet)


class TestUnitEigenvalues:
    """Test unit eigenvalue queries."""

    def test_stationary_vector(self, transition):
        """Test the stationary vector of a transition matrix."""
        eigen = JamEigen.compute(transition)
        assert eigen.count_unit_eigenvalues() == 1
        assert eigen.has_unique_unit_eigenvalue()

        stationary = eigen.find_unique_unit_eigenvector(normalize=True)
        assert stationary.equals_array([5.0 / 6.0, 1.0 / 6.0], DoubleComparator(1.0e-12))

    def test_unnormalized_copy(self, transition):
        """Test that the returned eigenvector is an independent copy."""
        eigen = JamEigen.compute(transition)
        index = eigen.get_unit_eigenvalues()[0]
        vector = eigen.find_unique_unit_eigenvector()
        vector.set(0, 100.0)
        assert eigen.view_vector(index).get(0) != 100.0

    def test_not_unique(self):
        """Test that repeated unit eigenvalues are rejected."""
        eigen = JamEigen.compute(JamMatrix.identity(3))
        assert eigen.get_unit_eigenvalues() == [0, 1, 2]
        assert not eigen.has_unique_unit_eigenvalue()
        with pytest.raises(DomainError, match="unique unit eigenvalue"):
            eigen.find_unique_unit_eigenvector()

    def test_none(self, symmetric_array):
        """Test a matrix without unit eigenvalues."""
        eigen = JamEigen.compute(MatrixView.of(symmetric_array))
        assert eigen.count_unit_eigenvalues() == 0
        with pytest.raises(DomainError):
            eigen.find_unique_unit_eigenvector()


class TestSelfCheck:
    """Test the decomposition self-check."""

    def test_failed_check(self, monkeypatch, symmetric_array):
        """Test that a failing self-check raises."""
        monkeypatch.setattr(JamEigen, "_is_valid", lambda *args: False)
        with pytest.raises(AssertionError):
            JamEigen.compute(MatrixView.of(symmetric_array))

    def test_check_disabled(self, monkeypatch, symmetric_array):
        """Test that the self-check can be switched off."""
        monkeypatch.setattr(JamEigen, "_is_valid", lambda *args: False)
        with get_config().local(linalg=LinalgConfig(check_decompositions=False)):
            eigen = JamEigen.compute(MatrixView.of(symmetric_array))
        assert eigen.view_values().length == 3


class TestReadOnlyResult:
    """Test that eigenvalues and eigenvectors cannot be changed."""

    def test_views_expose_no_mutators(self):
        """Test that value and vector views are read-only."""
        eigen = JamEigen.compute(JamMatrix.byrow(2, 2, 2.0, 1.0, 0.0, 3.0))
        assert not hasattr(eigen.view_values(), "set")
        assert not hasattr(eigen.view_vectors(), "set")
        assert not isinstance(eigen.view_vectors(), JamMatrix)

    def test_determinant_unaffected_by_copies(self):
        """Test that editing exported arrays leaves the determinant alone."""
        eigen = JamEigen.compute(JamMatrix.byrow(2, 2, 2.0, 1.0, 0.0, 3.0))
        values = eigen.view_values().to_array()
        values[0] = 10.0
        assert eigen.det() == pytest.approx(6.0)
