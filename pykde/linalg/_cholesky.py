"""
Cholesky decomposition primitive.

Computes A = D @ D.T for a square matrix using the column-by-column
running-sum recurrence:

    D[i][i] = sqrt(A[i][i] - sum_{k<i} D[i][k]^2)
    D[j][i] = (A[i][j] - sum_{k<i} D[i][k] * D[j][k]) / D[i][i]    j > i

Only the upper triangle of A is read, so A is assumed symmetric.

A non-positive term under the square root is clamped to zero and the
factor is flagged `is_real=False` instead of raising; callers must check
the flag. A division by a zero diagonal in the off-diagonal recurrence
raises SingularMatrixError.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pykde.core.exceptions import SingularMatrixError
from pykde.core.validation import check_square
from pykde.linalg.matrix import Matrix


@dataclass(frozen=True)
class CholeskyFactor:
    """
    Lower-triangular Cholesky factor.

    Attributes:
        lower: n x n array, zero above the diagonal (row i holds i+1 entries)
        is_real: False if some diagonal term was clamped from <= 0
        pivot_index: First clamped diagonal index, or None
    """
    lower: NDArray[np.floating[Any]]
    is_real: bool
    pivot_index: int | None = None

    @property
    def n(self) -> int:
        return self.lower.shape[0]

    def rows(self) -> list[NDArray[np.floating[Any]]]:
        """Jagged view: row i has i+1 entries."""
        return [self.lower[i, :i + 1] for i in range(self.n)]


def cholesky(matrix: Matrix, name: str = 'A') -> CholeskyFactor:
    """
    Factor a square matrix.

    Args:
        matrix: Square matrix to factor
        name: Matrix name used in error messages

    Returns:
        CholeskyFactor

    Raises:
        ShapeMismatchError: If matrix is not square
        SingularMatrixError: If an off-diagonal entry needs division by a
            zero diagonal
    """
    check_square(matrix.shape, name)
    A = np.asarray(matrix)
    n = matrix.row_count
    D = np.zeros((n, n), dtype=np.float64)
    is_real = True
    pivot_index = None

    for i in range(n):
        term = A[i, i] - float(np.dot(D[i, :i], D[i, :i]))
        if term <= 0.0:
            if is_real:
                pivot_index = i
            is_real = False
            term = 0.0
        D[i, i] = math.sqrt(term)

        for j in range(i + 1, n):
            if D[i, i] == 0.0:
                raise SingularMatrixError(
                    f"{name}: zero diagonal at index {i} in Cholesky recurrence",
                    matrix_name=name,
                    pivot_index=i,
                )
            D[j, i] = (A[i, j] - float(np.dot(D[i, :i], D[j, :i]))) / D[i, i]

    return CholeskyFactor(lower=D, is_real=is_real, pivot_index=pivot_index)


def forward_substitute(factor: CholeskyFactor, y: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Solve D z = y."""
    D = factor.lower
    z = np.zeros(factor.n, dtype=np.float64)
    for i in range(factor.n):
        if D[i, i] == 0.0:
            raise SingularMatrixError(f"zero pivot at index {i} in forward substitution", pivot_index=i)
        z[i] = (y[i] - float(np.dot(D[i, :i], z[:i]))) / D[i, i]
    return z


def back_substitute(factor: CholeskyFactor, z: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Solve D.T x = z, reusing the same factor."""
    D = factor.lower
    n = factor.n
    x = np.zeros(n, dtype=np.float64)
    for i in range(n - 1, -1, -1):
        if D[i, i] == 0.0:
            raise SingularMatrixError(f"zero pivot at index {i} in back substitution", pivot_index=i)
        x[i] = (z[i] - float(np.dot(D[i + 1:, i], x[i + 1:]))) / D[i, i]
    return x


def invert_lower(factor: CholeskyFactor) -> NDArray[np.floating[Any]]:
    """
    Invert the triangular factor, returning C = D^-1 zero-padded to n x n.

        C[i][i] = 1 / D[i][i]
        C[j][i] = -(sum_{i<=k<j} D[j][k] * C[k][i]) / D[j][j]    j > i
    """
    D = factor.lower
    n = factor.n
    C = np.zeros((n, n), dtype=np.float64)
    for i in range(n):
        if D[i, i] == 0.0:
            raise SingularMatrixError(f"zero pivot at index {i} in triangular inverse", pivot_index=i)
        C[i, i] = 1.0 / D[i, i]
    for i in range(n):
        for j in range(i + 1, n):
            C[j, i] = -float(np.dot(D[j, i:j], C[i:j, i])) / D[j, j]
    return C
