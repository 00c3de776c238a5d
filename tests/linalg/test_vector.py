"""
Tests for Vector.

Validates:
    - Construction from length, values, another Vector
    - Shape-checked arithmetic (add, subtract, negate, scale, dot, Hadamard)
    - Settable magnitude
    - Length edits
"""

import numpy as np
import pytest

from pykde import Vector
from pykde.core.exceptions import (
    DimensionError,
    NumericalError,
    ShapeMismatchError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_empty(self):
        assert len(Vector()) == 0

    def test_length_gives_zeros(self):
        v = Vector(3)
        assert len(v) == 3
        assert list(v) == [0.0, 0.0, 0.0]

    def test_values(self):
        v = Vector([1, 2.5, -3])
        assert v.count == 3
        assert v[1] == 2.5
        assert isinstance(v[0], float)

    def test_copy_constructor_is_independent(self):
        u = Vector([1.0, 2.0])
        v = Vector(u)
        v[0] = 10.0
        assert u[0] == 1.0

    def test_from_numpy_is_independent(self):
        arr = np.array([1.0, 2.0])
        v = Vector(arr)
        v[0] = 5.0
        assert arr[0] == 1.0

    def test_negative_length(self):
        with pytest.raises(ValidationError):
            Vector(-1)

    def test_rejects_2d(self):
        with pytest.raises(DimensionError):
            Vector([[1.0, 2.0]])

    def test_rejects_strings(self):
        with pytest.raises(ValidationError):
            Vector(["a", "b"])

    def test_equality(self):
        assert Vector([1.0, 2.0]) == Vector([1, 2])
        assert Vector([1.0, 2.0]) != Vector([1.0, 2.0, 0.0])

    def test_numpy_interop(self):
        np.testing.assert_array_equal(np.asarray(Vector([1, 2])), [1.0, 2.0])
        assert Vector([1, 2]).to_numpy().dtype == np.float64


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_add_sub(self):
        u, v = Vector([1, 2, 3]), Vector([4, 5, 6])
        assert u + v == Vector([5, 7, 9])
        assert v - u == Vector([3, 3, 3])

    def test_operators_do_not_mutate(self):
        u, v = Vector([1, 2]), Vector([3, 4])
        _ = u + v
        _ = -u
        _ = 2.0 * u
        assert u == Vector([1, 2])

    def test_negate(self):
        assert -Vector([1, -2]) == Vector([-1, 2])

    def test_scalar_multiply_both_sides(self):
        v = Vector([1, 2])
        assert 3 * v == Vector([3, 6])
        assert v * 3 == Vector([3, 6])
        assert np.float64(0.5) * v == Vector([0.5, 1.0])

    def test_dot_product(self):
        u, v = Vector([1, 2, 3]), Vector([4, 5, 6])
        assert u * v == 32.0
        assert Vector.dot(u, v) == 32.0

    def test_hadamard(self):
        assert Vector([1, 2, 3]).hadamard(Vector([4, 5, 6])) == Vector([4, 10, 18])

    @pytest.mark.parametrize("op", [
        lambda u, v: u + v,
        lambda u, v: u - v,
        lambda u, v: u * v,
        lambda u, v: u.hadamard(v),
    ])
    def test_length_mismatch(self, op):
        with pytest.raises(ShapeMismatchError):
            op(Vector([1, 2]), Vector([1, 2, 3]))


# ═══════════════════════════════════════════════════════════════════════
# Magnitude
# ═══════════════════════════════════════════════════════════════════════


class TestMagnitude:

    def test_get(self):
        assert Vector([3, 4]).magnitude == 5.0

    def test_set_rescales(self):
        v = Vector([3, 4])
        v.magnitude = 10.0
        np.testing.assert_allclose(v.to_numpy(), [6.0, 8.0])

    def test_set_zero(self):
        v = Vector([3, 4])
        v.magnitude = 0.0
        assert v == Vector([0, 0])

    def test_zero_vector_cannot_grow(self):
        v = Vector(2)
        with pytest.raises(NumericalError):
            v.magnitude = 1.0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            Vector([1, 0]).magnitude = -1.0


# ═══════════════════════════════════════════════════════════════════════
# Length edits
# ═══════════════════════════════════════════════════════════════════════


class TestLengthEdits:

    def test_append_insert_remove(self):
        v = Vector([1, 2])
        v.append(3)
        v.insert(0, 0)
        assert v == Vector([0, 1, 2, 3])
        v.remove_at(1)
        assert v == Vector([0, 2, 3])
        v.remove_at(-1)
        assert v == Vector([0, 2])

    def test_extend(self):
        v = Vector([1])
        v.extend([2, 3])
        assert v == Vector([1, 2, 3])

    def test_remove_out_of_range(self):
        with pytest.raises(IndexError):
            Vector(2).remove_at(2)
        with pytest.raises(IndexError):
            Vector().remove_at(-1)

    def test_insert_out_of_range(self):
        with pytest.raises(IndexError):
            Vector(1).insert(3, 1.0)
