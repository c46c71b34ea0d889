"""
Tests for VectorView and JamVector.
"""

import math

import numpy as np
import pytest

from jam import DoubleComparator
from jam.error import (
    DimensionMismatchError,
    JamFormatError,
    JamIndexError,
    JamRangeError,
    JamTypeError,
    UnsupportedOperationError,
    ZeroDivisorError,
)
from jam.vector import (
    ArrayWrapper,
    JamVector,
    Ownership,
    StreamCapture,
    VectorElement,
    VectorView,
)


class TestVectorViewFactories:
    """Test VectorView.of()."""

    def test_of_scalars(self):
        """Test a view over scalar arguments."""
        v = VectorView.of(1.0, 2.0, 3.0)
        assert isinstance(v, ArrayWrapper)
        assert v.length == 3
        assert len(v) == 3
        assert v.get(2) == 3.0

    def test_of_array_aliases(self):
        """Test that an array view reflects later changes to the array."""
        data = np.array([1.0, 2.0, 3.0])
        v = VectorView.of(data)
        data[1] = 20.0
        assert v.get(1) == 20.0

    def test_of_generator_captures(self):
        """Test that an iterable is captured into a private copy."""
        source = [1.0, 2.0, 3.0]
        v = VectorView.of(x * 2 for x in source)
        assert isinstance(v, StreamCapture)
        np.testing.assert_array_equal(v.to_array(), [2.0, 4.0, 6.0])

    def test_of_list_is_copied(self):
        """Test that a list source is not aliased."""
        source = [1.0, 2.0]
        v = VectorView.of(source)
        source[0] = 99.0
        assert v.get(0) == 1.0


class TestVectorViewAccess:
    """Test bounds checking and the Python protocol."""

    def test_out_of_bounds(self):
        """Test that invalid indexes fail."""
        v = VectorView.of(1.0, 2.0)
        with pytest.raises(JamIndexError):
            v.get(2)
        with pytest.raises(JamIndexError):
            v.get(-1)

    def test_getitem_and_iter(self):
        """Test indexing and iteration."""
        v = VectorView.of(1.0, 2.0, 3.0)
        assert v[1] == 2.0
        assert list(v) == [1.0, 2.0, 3.0]
        with pytest.raises(IndexError):
            v[-1]

    def test_to_array_is_independent(self):
        """Test that to_array returns a new array."""
        data = np.array([1.0, 2.0])
        v = VectorView.of(data)
        out = v.to_array()
        out[0] = 50.0
        assert data[0] == 1.0


class TestVectorViewDerived:
    """Test derived operations of VectorView."""

    def test_equals_vector_with_tolerance(self):
        """Test tolerance-based equality."""
        v = VectorView.of(1.0, 2.0)
        assert v.equals_vector(VectorView.of(1.0 + 1.0e-14, 2.0))
        assert not v.equals_vector(VectorView.of(1.0 + 1.0e-6, 2.0))
        assert v.equals_vector(VectorView.of(1.0 + 1.0e-6, 2.0), DoubleComparator(1.0e-4))

    def test_equals_vector_length_mismatch(self):
        """Test that different lengths are never equal."""
        assert not VectorView.of(1.0, 2.0).equals_vector(VectorView.of(1.0))

    def test_equals_array(self):
        """Test equality against a plain array."""
        assert VectorView.of(1.0, 2.0).equals_array([1.0, 2.0])
        assert not VectorView.of(1.0, 2.0).equals_array([1.0, 2.0, 3.0])

    def test_plus_minus_scalar(self):
        """Test scalar arithmetic producing new vectors."""
        v = VectorView.of(1.0, 2.0)
        assert v.plus(1.0).equals_array([2.0, 3.0])
        assert v.minus(1.0).equals_array([0.0, 1.0])
        assert v.equals_array([1.0, 2.0])

    def test_plus_minus_vector(self):
        """Test elementwise arithmetic producing new vectors."""
        v = VectorView.of(1.0, 2.0)
        w = VectorView.of(10.0, 20.0)
        assert v.plus(w).equals_array([11.0, 22.0])
        assert w.minus(v).equals_array([9.0, 18.0])

    def test_times(self):
        """Test scalar multiplication."""
        assert VectorView.of(1.0, -2.0).times(3.0).equals_array([3.0, -6.0])

    def test_dot(self):
        """Test the inner product."""
        assert VectorView.of(1.0, 2.0, 3.0).dot(VectorView.of(4.0, 5.0, 6.0)) == 32.0

    def test_dot_length_mismatch(self):
        """Test that the inner product checks lengths."""
        with pytest.raises(DimensionMismatchError):
            VectorView.of(1.0, 2.0).dot(VectorView.of(1.0))

    def test_stream_elements(self):
        """Test element streaming."""
        elements = list(VectorView.of(5.0, 0.0, -1.0).stream_elements())
        assert elements[0] == VectorElement(0, 5.0)
        assert elements[2].is_negative()

    def test_stream_non_zero(self):
        """Test that zeros are skipped."""
        elements = list(VectorView.of(0.0, 3.0, 1.0e-15, -2.0).stream_non_zero())
        assert [e.index for e in elements] == [1, 3]


class TestJamVectorFactories:
    """Test JamVector construction."""

    def test_dense(self):
        """Test a zero-filled vector."""
        v = JamVector.dense(4)
        assert v.length == 4
        assert v.equals_array([0.0] * 4)
        assert v.ownership == Ownership.OWNED
        assert v.is_dense

    def test_ones_and_rep(self):
        """Test constant fills."""
        assert JamVector.ones(3).equals_array([1.0, 1.0, 1.0])
        assert JamVector.rep(2.5, 2).equals_array([2.5, 2.5])

    def test_negative_length(self):
        """Test that negative lengths are rejected."""
        with pytest.raises(JamRangeError):
            JamVector.dense(-1)
        with pytest.raises(JamRangeError):
            JamVector.rep(1.0, -2)

    def test_copy_of_array_is_independent(self):
        """Test that copy construction does not alias the array."""
        data = np.array([1.0, 2.0, 3.0])
        v = JamVector.copy_of(data)
        v.set(0, 10.0)
        data[1] = 20.0
        assert data[0] == 1.0
        assert v.get(1) == 2.0
        assert v.ownership == Ownership.OWNED

    def test_copy_of_view_is_independent(self):
        """Test copy construction from another vector."""
        original = JamVector.copy_of([1.0, 2.0])
        copy = JamVector.copy_of(original)
        copy.set(0, 5.0)
        assert original.get(0) == 1.0

    def test_wrap_aliases_array(self):
        """Test that writes are visible both ways through a wrapped array."""
        data = np.array([1.0, 2.0, 3.0])
        v = JamVector.wrap(data)
        assert v.ownership == Ownership.BORROWED

        v.set(0, 10.0)
        assert data[0] == 10.0

        data[2] = 30.0
        assert v.get(2) == 30.0

    def test_wrap_in_place_arithmetic_aliases(self):
        """Test that in-place arithmetic writes through to the wrapped array."""
        data = np.array([1.0, 2.0])
        JamVector.wrap(data).multiply(2.0).add(1.0)
        np.testing.assert_array_equal(data, [3.0, 5.0])

    def test_wrap_requires_float_array(self):
        """Test wrap() argument checks."""
        with pytest.raises(JamTypeError):
            JamVector.wrap([1.0, 2.0])
        with pytest.raises(JamTypeError):
            JamVector.wrap(np.array([1, 2]))
        with pytest.raises(DimensionMismatchError):
            JamVector.wrap(np.zeros((2, 2)))

    def test_parse(self):
        """Test delimited parsing."""
        assert JamVector.parse_csv("1.0, 2.5,-3").equals_array([1.0, 2.5, -3.0])
        assert JamVector.parse("1 | 2", "|").equals_array([1.0, 2.0])
        assert JamVector.parse_csv("").length == 0

    def test_parse_malformed(self):
        """Test that non-numeric tokens fail."""
        with pytest.raises(JamFormatError, match="abc"):
            JamVector.parse_csv("1.0,abc,3.0")
        with pytest.raises(JamFormatError):
            JamVector.parse_csv("1.0,,3.0")

    @pytest.mark.parametrize("token", ["1_000", "infinity", "inf", "nan", "0x10", "1e", "--1", "\u0661"])
    def test_parse_rejects_non_decimal_tokens(self, token):
        """Test that only plain decimal and scientific notation is accepted."""
        with pytest.raises(JamFormatError):
            JamVector.parse_csv(f"{token},2")

    def test_parse_special_values(self):
        """Test NaN and signed Infinity tokens."""
        v = JamVector.parse_csv("NaN, Infinity,-Infinity,1e-3,.5,2.")
        assert math.isnan(v.get(0))
        assert v.get(1) == math.inf
        assert v.get(2) == -math.inf
        assert v.to_array()[3:].tolist() == [0.001, 0.5, 2.0]


class TestJamVectorMutation:
    """Test in-place operations."""

    def test_in_place_ops_return_self(self):
        """Test chaining of in-place operations."""
        v = JamVector.copy_of([1.0, 2.0])
        assert v.add(1.0) is v
        assert v.subtract(VectorView.of(1.0, 1.0)) is v
        assert v.multiply(4.0) is v
        assert v.divide(2.0) is v
        assert v.equals_array([2.0, 4.0])

    def test_daxpy(self):
        """Test this + scalar * that."""
        v = JamVector.copy_of([1.0, 2.0, 3.0])
        v.daxpy(2.0, VectorView.of(1.0, 1.0, 1.0))
        assert v.equals_array([3.0, 4.0, 5.0])

    def test_daxpy_inverse_restores(self, rng):
        """Test that daxpy(a, x) followed by daxpy(-a, x) is the identity."""
        original = rng.standard_normal(20)
        that = JamVector.copy_of(rng.standard_normal(20))

        v = JamVector.copy_of(original)
        v.daxpy(3.7, that).daxpy(-3.7, that)
        assert v.equals_array(original, DoubleComparator(1.0e-12))

    def test_mismatch_before_mutation(self):
        """Test that length mismatches fail without modifying the vector."""
        v = JamVector.copy_of([1.0, 2.0])
        with pytest.raises(DimensionMismatchError):
            v.daxpy(1.0, VectorView.of(1.0, 2.0, 3.0))
        with pytest.raises(DimensionMismatchError):
            v.add([1.0])
        assert v.equals_array([1.0, 2.0])

    def test_normalize(self):
        """Test rescaling to unit sum."""
        v = JamVector.copy_of([1.0, 3.0]).normalize()
        assert v.equals_array([0.25, 0.75])

    def test_normalize_zero_sum(self):
        """Test the zero-sum guard."""
        with pytest.raises(ZeroDivisorError):
            JamVector.copy_of([1.0, -1.0]).normalize()

    def test_unitize(self):
        """Test rescaling to unit 2-norm."""
        v = JamVector.copy_of([3.0, 4.0]).unitize()
        assert v.equals_array([0.6, 0.8])

    def test_unitize_zero_norm(self):
        """Test the zero-norm guard."""
        with pytest.raises(ZeroDivisorError):
            JamVector.dense(3).unitize()

    def test_set_out_of_bounds(self):
        """Test that invalid writes fail."""
        with pytest.raises(JamIndexError):
            JamVector.dense(2).set(2, 1.0)

    def test_copy(self):
        """Test that copy() is independent and owned."""
        data = np.array([1.0, 2.0])
        copy = JamVector.wrap(data).copy()
        copy.set(0, 7.0)
        assert data[0] == 1.0
        assert copy.ownership == Ownership.OWNED


class TestJamVectorEquality:
    """Test value equality and hashing."""

    def test_eq_uses_tolerance(self):
        """Test == with the default tolerance."""
        assert JamVector.copy_of([1.0, 2.0]) == VectorView.of(1.0, 2.0 + 1.0e-14)
        assert JamVector.copy_of([1.0, 2.0]) != JamVector.copy_of([1.0, 2.1])

    def test_hash_fails(self):
        """Test that vectors may not be hashed."""
        with pytest.raises(UnsupportedOperationError):
            hash(JamVector.dense(2))
        with pytest.raises(TypeError):
            {JamVector.dense(2): 1}


class TestVectorElement:
    """Test VectorElement."""

    def test_predicates(self):
        """Test value predicates."""
        assert VectorElement(0, 0.0).is_zero()
        assert VectorElement(1, 2.0).is_positive()
        assert VectorElement(1, 2.0).is_non_zero()
        assert not VectorElement(2, math.nan).is_finite()

    def test_negative_index(self):
        """Test that negative indexes are invalid."""
        with pytest.raises(JamIndexError):
            VectorElement(-1, 0.0)

    def test_immutable(self):
        """Test that elements are frozen."""
        element = VectorElement(0, 1.0)
        with pytest.raises(AttributeError):
            element.value = 2.0
