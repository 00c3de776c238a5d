"""
Dense linear algebra for pykde.

Public API:
    Vector, Matrix      - containers with shape-checked operators
    solve(A, y)         - Cholesky solve of A x = y
    inverse(A)          - Cholesky-based inverse
    determinant(A)      - diagonal-cycling determinant (exact for n <= 3)
    trace(A)            - sum of the diagonal
    eigen_pairs(A)      - not implemented, always fails
    transpose(A)        - transposed copy

The solve family returns pykde.core.Result; check `.ok` before using
`.value`.
"""

from pykde.linalg.vector import Vector
from pykde.linalg.matrix import Matrix
from pykde.linalg.solvers import (
    EigenPairs,
    determinant,
    eigen_pairs,
    inverse,
    solve,
    trace,
    transpose,
)

__all__ = [
    "Vector",
    "Matrix",
    "EigenPairs",
    "solve",
    "inverse",
    "determinant",
    "trace",
    "eigen_pairs",
    "transpose",
]
