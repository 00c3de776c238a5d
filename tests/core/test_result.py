"""
Tests for the Result[P] envelope.

Validates:
    - Success and failure construction
    - Frozen immutability
    - unwrap() raises the exception matching the failure kind
    - has_warning() method
"""

from dataclasses import FrozenInstanceError

import pytest

from pykde.core.exceptions import (
    NotPositiveDefiniteError,
    ShapeMismatchError,
    SingularMatrixError,
)
from pykde.core.result import Failure, Result


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:

    def test_success(self):
        result = Result.success(42.0, info={"method": "test"}, timing={"total_seconds": 0.01})
        assert result.ok
        assert result.value == 42.0
        assert result.failure is None
        assert result.info["method"] == "test"
        assert result.timing["total_seconds"] == 0.01

    def test_failure_has_no_value(self):
        result = Result.fail(Failure.NUMERICALLY_INVALID, info={"method": "test"})
        assert not result.ok
        assert result.value is None
        assert result.failure is Failure.NUMERICALLY_INVALID

    def test_defaults(self):
        result = Result(value=1.0, info={})
        assert result.timing is None
        assert result.failure is None
        assert result.warnings == ()

    def test_frozen(self):
        result = Result.success(1.0, info={})
        with pytest.raises(FrozenInstanceError):
            result.value = 2.0


# ═══════════════════════════════════════════════════════════════════════
# unwrap
# ═══════════════════════════════════════════════════════════════════════


class TestUnwrap:

    def test_success_returns_value(self):
        assert Result.success("x", info={}).unwrap() == "x"

    def test_shape_mismatch(self):
        result = Result.fail(Failure.SHAPE_MISMATCH, info={"reason": "A: not square"})
        with pytest.raises(ShapeMismatchError, match="not square"):
            result.unwrap()

    def test_not_positive_definite(self):
        result = Result.fail(
            Failure.NUMERICALLY_INVALID,
            info={"reason": "not PD", "matrix_name": "A", "pivot_index": 1, "singular": False},
        )
        with pytest.raises(NotPositiveDefiniteError) as exc_info:
            result.unwrap()
        assert exc_info.value.pivot_index == 1

    def test_singular(self):
        result = Result.fail(
            Failure.NUMERICALLY_INVALID,
            info={"reason": "zero pivot", "pivot_index": 0, "singular": True},
        )
        with pytest.raises(SingularMatrixError):
            result.unwrap()

    def test_not_implemented(self):
        result = Result.fail(Failure.NOT_IMPLEMENTED, info={"method": "eigen_pairs"})
        with pytest.raises(NotImplementedError, match="eigen_pairs"):
            result.unwrap()


# ═══════════════════════════════════════════════════════════════════════
# Warnings
# ═══════════════════════════════════════════════════════════════════════


class TestWarnings:

    def test_has_warning(self):
        result = Result.success(1.0, info={}, warnings=("not the true determinant for n=4",))
        assert result.has_warning("true determinant")
        assert not result.has_warning("singular")

    def test_no_warnings(self):
        assert not Result.success(1.0, info={}).has_warning("anything")
