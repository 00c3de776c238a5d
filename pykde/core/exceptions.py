"""
Exception hierarchy for pykde.

All exceptions inherit from PyKDEError to allow catching any
library-specific error.

Design principles:
    - Shape mismatches are caller bugs and carry no extra payload
    - Numerical failures carry the offending matrix name and pivot
    - Solve-family operations report failures through Result, not by
      raising; these classes are what Result.unwrap() raises
"""


class PyKDEError(Exception):
    """Base exception for all pykde errors."""
    pass


class ValidationError(PyKDEError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when an input has the wrong number of dimensions
    (e.g. a 2D array where a Vector is expected).
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Operand shapes are incompatible.

    Raised by arithmetic operators, structural matrix edits and kernel
    mutations whose operands disagree in row, column or length.
    """

    default_message = "Vector/Matrix sizes incompatible. Operation not possible."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class NumericalError(PyKDEError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when a division by a zero pivot is required, e.g. in the
    off-diagonal Cholesky recurrence or during substitution.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Index of the zero pivot, if known
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not positive definite.

    Raised when an operation requires a positive definite matrix
    (e.g., Cholesky decomposition) but the matrix fails this requirement.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: First diagonal index whose pre-root term was <= 0
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
