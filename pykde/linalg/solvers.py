"""
Solve-family operations on dense matrices.

Every operation returns a Result instead of raising for shape or
numerical failure:

    solve(A, y)      A x = y via Cholesky, forward + back substitution
    inverse(A)       A^-1 = (D^-1)^T D^-1 from the Cholesky factor D
    determinant(A)   diagonal-cycling formula on the raw matrix
    trace(A)         sum of the diagonal
    eigen_pairs(A)   not implemented; always fails
    transpose(A)     always succeeds, returns a Matrix directly

Solve and inverse assume A is symmetric positive definite. A factor that
is not real, or a zero pivot, yields Failure.NUMERICALLY_INVALID with no
value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from pykde.core.compute.timing import timed
from pykde.core.exceptions import SingularMatrixError
from pykde.core.result import Failure, Result
from pykde.linalg._cholesky import (
    CholeskyFactor,
    back_substitute,
    cholesky,
    forward_substitute,
    invert_lower,
)
from pykde.linalg.matrix import Matrix
from pykde.linalg.vector import Vector


@dataclass(frozen=True)
class EigenPairs:
    """Payload reserved for eigen_pairs: eigenvalues and column eigenvectors."""
    values: Vector
    vectors: Matrix


def _not_square(method: str, A: Matrix) -> Result[Any]:
    return Result.fail(
        Failure.SHAPE_MISMATCH,
        info={
            'method': method,
            'shape': A.shape,
            'reason': f"A: expected square matrix, got shape {A.shape}",
        },
    )


def _not_real(method: str, n: int, factor: CholeskyFactor, timing: dict[str, float]) -> Result[Any]:
    reason = f"A is not positive definite (non-positive pivot at index {factor.pivot_index})"
    return Result.fail(
        Failure.NUMERICALLY_INVALID,
        info={
            'method': method,
            'n': n,
            'matrix_name': 'A',
            'pivot_index': factor.pivot_index,
            'singular': False,
            'reason': reason,
        },
        timing=timing,
        warnings=(reason,),
    )


def _singular(method: str, n: int, err: SingularMatrixError, timing: dict[str, float]) -> Result[Any]:
    return Result.fail(
        Failure.NUMERICALLY_INVALID,
        info={
            'method': method,
            'n': n,
            'matrix_name': 'A',
            'pivot_index': err.pivot_index,
            'singular': True,
            'reason': str(err),
        },
        timing=timing,
        warnings=(str(err),),
    )


def transpose(A: Matrix) -> Matrix:
    """Return the transpose of A."""
    return A.transpose()


def solve(A: Matrix, y: Vector) -> Result[Vector]:
    """
    Solve A x = y for symmetric positive definite A.

    Parameters
    ----------
    A : Matrix
        Square SPD matrix (n x n).
    y : Vector
        Right-hand side, length n.

    Returns
    -------
    Result[Vector]
        x on success. SHAPE_MISMATCH if A is not square or len(y) != n;
        NUMERICALLY_INVALID if A is not positive definite.
    """
    if not A.is_square or len(y) != A.row_count:
        return Result.fail(
            Failure.SHAPE_MISMATCH,
            info={
                'method': 'cholesky_solve',
                'shape': A.shape,
                'rhs_length': len(y),
                'reason': f"A {A.shape} and y (length {len(y)}) are incompatible",
            },
        )

    n = A.row_count
    with timed() as timer:
        try:
            with timer.section('cholesky'):
                factor = cholesky(A)
            if factor.is_real:
                with timer.section('substitution'):
                    z = forward_substitute(factor, y.to_numpy())
                    x = back_substitute(factor, z)
        except SingularMatrixError as err:
            singular = err
        else:
            singular = None

    if singular is not None:
        return _singular('cholesky_solve', n, singular, timer.result())
    if not factor.is_real:
        return _not_real('cholesky_solve', n, factor, timer.result())

    return Result.success(
        Vector(x),
        info={'method': 'cholesky_solve', 'n': n},
        timing=timer.result(),
    )


def inverse(A: Matrix) -> Result[Matrix]:
    """
    Invert a symmetric positive definite matrix.

    Computes the Cholesky factor D, inverts it as a triangular matrix,
    then forms A^-1 = (D^-1)^T D^-1.

    Returns
    -------
    Result[Matrix]
        A^-1 on success. SHAPE_MISMATCH if A is not square;
        NUMERICALLY_INVALID if A is not positive definite.
    """
    if not A.is_square:
        return _not_square('cholesky_inverse', A)

    n = A.row_count
    with timed() as timer:
        try:
            with timer.section('cholesky'):
                factor = cholesky(A)
            if factor.is_real:
                with timer.section('triangular_inverse'):
                    C = invert_lower(factor)
                with timer.section('reconstruct'):
                    inv = C.T @ C
        except SingularMatrixError as err:
            singular = err
        else:
            singular = None

    if singular is not None:
        return _singular('cholesky_inverse', n, singular, timer.result())
    if not factor.is_real:
        return _not_real('cholesky_inverse', n, factor, timer.result())

    return Result.success(
        Matrix(inv),
        info={'method': 'cholesky_inverse', 'n': n},
        timing=timer.result(),
    )


def _wrap_product(M: np.ndarray, start: int, step: int) -> float:
    """Product of M[j][(start + step * j) mod n] over all rows j."""
    n = M.shape[0]
    cols = (start + step * np.arange(n)) % n
    return float(np.prod(M[np.arange(n), cols]))


def determinant(A: Matrix) -> Result[float]:
    """
    Determinant by diagonal cycling on the raw matrix.

    Sums the products along every forward wrapped diagonal
    A[j][(i + j) mod n] and subtracts the products along every backward
    wrapped diagonal A[j][(n - 1 - i - j) mod n]. With two columns each
    wrap repeats, so only the leading one is counted.

    This is the rule of Sarrus: exact for n <= 3 only. For n >= 4 the
    value is NOT the mathematical determinant, and callers evaluating
    kernels of four or more dimensions inherit that behaviour.

    Returns
    -------
    Result[float]
        SHAPE_MISMATCH if A is not square. The empty matrix gives 1.0.
    """
    if not A.is_square:
        return _not_square('diagonal_cycling', A)

    n = A.row_count
    M = np.asarray(A)
    with timed() as timer:
        if n == 0:
            det = 1.0
        elif n == 1:
            det = float(M[0, 0])
        else:
            wraps = 1 if n == 2 else n
            forward = sum(_wrap_product(M, i, 1) for i in range(wraps))
            backward = sum(_wrap_product(M, n - 1 - i, -1) for i in range(wraps))
            det = forward - backward

    info = {'method': 'diagonal_cycling', 'n': n, 'exact': n <= 3}
    warnings = () if n <= 3 else (f"diagonal cycling is not the true determinant for n={n} > 3",)
    return Result.success(det, info=info, timing=timer.result(), warnings=warnings)


def trace(A: Matrix) -> Result[float]:
    """Sum of the diagonal. SHAPE_MISMATCH if A is not square."""
    if not A.is_square:
        return _not_square('trace', A)
    n = A.row_count
    value = float(np.trace(np.asarray(A))) if n else 0.0
    return Result.success(value, info={'method': 'trace', 'n': n})


def eigen_pairs(A: Matrix) -> Result[EigenPairs]:
    """
    Eigenvalue/eigenvector pairs of a square matrix.

    Not implemented: the Cholesky factor is computed and discarded, and
    the result always reports Failure.NOT_IMPLEMENTED (SHAPE_MISMATCH if
    A is not square).
    """
    if not A.is_square:
        return _not_square('eigen_pairs', A)

    n = A.row_count
    with timed() as timer:
        try:
            positive_definite = cholesky(A).is_real
        except SingularMatrixError:
            positive_definite = False

    reason = "eigen-decomposition is not implemented"
    return Result.fail(
        Failure.NOT_IMPLEMENTED,
        info={
            'method': 'eigen_pairs',
            'n': n,
            'positive_definite': positive_definite,
            'reason': reason,
        },
        timing=timer.result(),
        warnings=(reason,),
    )
