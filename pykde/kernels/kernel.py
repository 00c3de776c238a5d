"""
Kernel base classes.

Kernel (N-D) holds a center `mu` and a smoothing base matrix L. The
smoothing matrix H = L @ L.T is derived state: it is rebuilt from L after
every structural edit and never patched in place, so it is always
symmetric positive semi-definite.

Kernel1D holds scalar smoothing h and mean mu.

Both base classes return density 0.0 everywhere; GaussKernel and
LogisticKernel supply the actual densities.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pykde.core.exceptions import ShapeMismatchError, ValidationError
from pykde.core.validation import check_positive, check_real, check_same_length
from pykde import linalg
from pykde.kernels._common import BASE_DENSITY, warn_degenerate
from pykde.linalg.matrix import Matrix
from pykde.linalg.vector import Vector


class Kernel:
    """
    N-dimensional kernel with a Cholesky-style smoothing base.

    Invariant after every public call:
        len(center) == smoothing_base.row_count == smoothing_base.column_count
        smoothing_matrix == smoothing_base @ smoothing_base.T

    Parameters
    ----------
    dimensions : int
        Initial dimensionality. The center starts at zero and every entry
        of the smoothing base starts at 1.0.
    """

    def __init__(self, dimensions: int = 0):
        if dimensions < 0:
            raise ValidationError(f"dimensions: must be >= 0, got {dimensions}")
        self._mu = Vector(dimensions)
        self._base = Matrix(np.ones((dimensions, dimensions)))
        self._h = Matrix()
        self._rebuild_smoothing()

    def _rebuild_smoothing(self) -> None:
        self._h = self._base * self._base.transpose()

    def _check_index(self, index: int) -> int:
        n = self.dimensions
        if not -n <= index < n:
            raise IndexError(f"dimension index {index} out of range for {n} dimensions")
        return index % n

    def _append_unit_dimension(self) -> None:
        """Grow L by one zero column and a new row with 1.0 on the diagonal."""
        n = self._base.row_count
        self._base.insert_column(n)
        row = Vector(n + 1)
        row[n] = 1.0
        self._base.append_row(row)

    # --- Read-only views ---

    @property
    def dimensions(self) -> int:
        return len(self._mu)

    @property
    def center(self) -> Vector:
        """Copy of the kernel center."""
        return self._mu.copy()

    @property
    def smoothing_base(self) -> Matrix:
        """Copy of the base matrix L."""
        return self._base.copy()

    @property
    def smoothing_matrix(self) -> Matrix:
        """Copy of H = L @ L.T."""
        return self._h.copy()

    # --- Mutations ---

    def set_center(self, center: Vector | ArrayLike) -> None:
        """
        Replace the center.

        If the new center has a different length, trailing rows and columns
        of L are dropped, or unit dimensions are appended, to match.
        """
        center = Vector(center)
        while self._base.row_count > len(center):
            last = self._base.row_count - 1
            self._base.remove_column_at(last)
            self._base.remove_row_at(last)
        while self._base.row_count < len(center):
            self._append_unit_dimension()
        self._mu = center
        self._rebuild_smoothing()

    def set_center_item(self, index: int, value: float) -> None:
        """Replace one coordinate of the center. H is unaffected."""
        self._mu[self._check_index(index)] = check_real(value, 'value')

    def add_dimension(self, center: float = 0.0, row: Vector | ArrayLike | None = None) -> None:
        """
        Append one dimension.

        Parameters
        ----------
        center : float
            Center of the new dimension.
        row : Vector, optional
            New last row of L, one entry per existing dimension plus the
            new one. If omitted, the row is zero except 1.0 on the diagonal.

        Raises
        ------
        ShapeMismatchError
            If len(row) != dimensions + 1.
        ValidationError
            If center is not a finite number. Both checks run before
            anything is modified.
        """
        center = check_real(center, 'center')
        if row is not None:
            row = Vector(row)
            check_same_length(len(row), self.dimensions + 1, 'row')

        if row is None:
            self._append_unit_dimension()
        else:
            self._base.insert_column(self._base.row_count)
            self._base.append_row(row)
        self._mu.append(center)
        self._rebuild_smoothing()

    def remove_dimension(self) -> None:
        """Remove the last dimension."""
        self.remove_dimension_at(self.dimensions - 1)

    def remove_dimension_at(self, index: int) -> None:
        """Remove dimension `index` from the center and its row and column from L."""
        index = self._check_index(index)
        self._mu.remove_at(index)
        self._base.remove_column_at(index)
        self._base.remove_row_at(index)
        self._rebuild_smoothing()

    def set_kernel_base_row(self, row: Vector | ArrayLike) -> None:
        """
        Overwrite the leading entries of row len(row) - 1 of L.

        A row of length k addresses the k-th row of L, whose lower-triangular
        part has exactly k entries. An empty row is a no-op.

        Raises
        ------
        ShapeMismatchError
            If len(row) > dimensions.
        """
        row = Vector(row)
        k = len(row)
        if k > self._base.row_count:
            raise ShapeMismatchError()
        if k < 1:
            return
        target = self._base[k - 1]
        for i, value in enumerate(row):
            target[i] = value
        self._rebuild_smoothing()

    # --- Density ---

    def _quadratic_terms(self, x: Vector | ArrayLike) -> tuple[float, float] | None:
        """
        Return (d^T H^-1 d, det H) for d = x - mu.

        Returns None, after warning, when H cannot be inverted or its
        determinant is not positive.

        Raises:
            ShapeMismatchError: If len(x) != dimensions
        """
        d = Vector(x) - self._mu

        inv = linalg.inverse(self._h)
        if not inv.ok:
            warn_degenerate(type(self).__name__, inv.info['reason'])
            return None
        det = linalg.determinant(self._h)
        if not det.ok or det.value <= 0.0:
            warn_degenerate(type(self).__name__, f"determinant {det.value}")
            return None

        return Vector.dot(d, inv.value * d), det.value

    def probability_at(self, x: Vector | ArrayLike) -> float:
        """Base density: 0.0 everywhere."""
        return BASE_DENSITY

    def __repr__(self) -> str:
        return f"{type(self).__name__}(center={self._mu.to_numpy().tolist()!r}, smoothing_base={np.asarray(self._base).tolist()!r})"


class Kernel1D:
    """
    One-dimensional kernel with scalar smoothing h and mean mu.

    Parameters
    ----------
    smoothing : float
        Bandwidth h, finite and > 0.
    mean : float
        Center mu, finite.
    """

    def __init__(self, smoothing: float = 1.0, mean: float = 0.0):
        self._h = check_positive(smoothing, 'smoothing')
        self._mu = check_real(mean, 'mean')

    @property
    def smoothing(self) -> float:
        return self._h

    @property
    def mean(self) -> float:
        return self._mu

    @property
    def dimensions(self) -> int:
        return 1

    def probability_at(self, x: float) -> float:
        """Base density: 0.0 everywhere."""
        return BASE_DENSITY

    def __repr__(self) -> str:
        return f"{type(self).__name__}(smoothing={self._h!r}, mean={self._mu!r})"
