"""
Generic result container for pykde linear-algebra operations.

The solve family (solve, inverse, determinant, trace, eigen_pairs) reports
success or failure through a Result instead of raising. Callers check
`ok` (or pattern-match on `failure`) rather than catching.

Design decisions:
    - Generic over payload P (Vector, Matrix, float, EigenPairs)
    - On failure `value` is None: no partial output is ever exposed
    - info dict for flexible metadata (method, size, failure reason)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TypeVar, Generic, Any

from pykde.core.exceptions import (
    NotPositiveDefiniteError,
    ShapeMismatchError,
    SingularMatrixError,
)

P = TypeVar('P')  # Payload type


class Failure(Enum):
    """Why an operation produced no value."""
    SHAPE_MISMATCH = 'shape_mismatch'
    NUMERICALLY_INVALID = 'numerically_invalid'
    NOT_IMPLEMENTED = 'not_implemented'


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for linear-algebra operations.

    Type Parameters:
        P: The payload type

    Attributes:
        value: The payload, or None when the operation failed
        info: Structured metadata (method, n, reason, pivot_index)
        timing: Execution timing breakdown, or None if not measured
        failure: Failure kind, or None on success
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> result = solve(A, y)
        >>> if result.ok:
        ...     x = result.value
        >>> elif result.failure is Failure.NUMERICALLY_INVALID:
        ...     print(result.info['reason'])
    """
    value: P | None
    info: dict[str, Any]
    timing: dict[str, float] | None = None
    failure: Failure | None = None
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def success(
        cls,
        value: P,
        info: dict[str, Any],
        timing: dict[str, float] | None = None,
        warnings: tuple[str, ...] = (),
    ) -> 'Result[P]':
        return cls(value=value, info=info, timing=timing, warnings=warnings)

    @classmethod
    def fail(
        cls,
        failure: Failure,
        info: dict[str, Any],
        timing: dict[str, float] | None = None,
        warnings: tuple[str, ...] = (),
    ) -> 'Result[P]':
        return cls(value=None, info=info, timing=timing, failure=failure, warnings=warnings)

    @property
    def ok(self) -> bool:
        """True if the operation produced a value."""
        return self.failure is None

    def unwrap(self) -> P:
        """
        Return the value, raising the exception matching the failure kind.

        Raises:
            ShapeMismatchError: failure is SHAPE_MISMATCH
            NotPositiveDefiniteError: NUMERICALLY_INVALID from a non-real factor
            SingularMatrixError: NUMERICALLY_INVALID from a zero pivot
            NotImplementedError: failure is NOT_IMPLEMENTED
        """
        if self.failure is None:
            return self.value
        reason = self.info.get('reason')
        if self.failure is Failure.SHAPE_MISMATCH:
            raise ShapeMismatchError(reason)
        if self.failure is Failure.NOT_IMPLEMENTED:
            raise NotImplementedError(reason or f"{self.info.get('method')} is not implemented")
        if self.info.get('singular', False):
            raise SingularMatrixError(
                reason or "matrix is singular",
                matrix_name=self.info.get('matrix_name'),
                pivot_index=self.info.get('pivot_index'),
            )
        raise NotPositiveDefiniteError(
            reason or "matrix is not positive definite",
            matrix_name=self.info.get('matrix_name'),
            pivot_index=self.info.get('pivot_index'),
        )

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
