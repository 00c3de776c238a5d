"""
Input validation utilities for pykde.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pykde.core.exceptions import (
    DimensionError,
    ShapeMismatchError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    The result is always a fresh copy, so callers own their storage.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.size == 0:
        return result.astype(np.float64)

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype}, expected real data")

    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64)


def check_real(value: float, name: str) -> float:
    """
    Verify a scalar is a finite real number.

    Args:
        value: Scalar to check
        name: Parameter name for error messages

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not a number, or is NaN or Inf
    """
    try:
        result = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name}: expected a real number, got {value!r}") from e
    if not math.isfinite(result):
        raise ValidationError(f"{name}: must be finite, got {result}")
    return result


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_square(shape: tuple[int, int], name: str) -> None:
    """
    Verify a matrix shape is square.

    Args:
        shape: (rows, columns)
        name: Parameter name for error messages

    Raises:
        ShapeMismatchError: If rows != columns
    """
    rows, cols = shape
    if rows != cols:
        raise ShapeMismatchError(f"{name}: expected square matrix, got shape ({rows}, {cols})")


def check_same_length(length: int, expected: int, name: str) -> None:
    """
    Verify an operand has the expected length.

    Raises:
        ShapeMismatchError: If length != expected
    """
    if length != expected:
        raise ShapeMismatchError(f"{name}: expected length {expected}, got {length}")


def check_positive(value: float, name: str) -> float:
    """
    Verify a scalar is finite and strictly positive.

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not a finite number > 0
    """
    result = check_real(value, name)
    if result <= 0.0:
        raise ValidationError(f"{name}: must be finite and > 0, got {result}")
    return result
