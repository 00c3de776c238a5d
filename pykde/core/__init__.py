"""
Core infrastructure for pykde.

This module provides shared abstractions and utilities used by the
linear-algebra engine and the kernel densities.

Key components:
    result: Generic Result[P] envelope and Failure kinds
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pykde.core.result import Failure, Result
from pykde.core.exceptions import (
    PyKDEError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    NumericalError,
    SingularMatrixError,
    NotPositiveDefiniteError,
)

__all__ = [
    # Result
    "Failure",
    "Result",
    # Exceptions
    "PyKDEError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "NumericalError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
]
