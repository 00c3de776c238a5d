"""
Gaussian kernels.

GaussKernel (N-D):
    p(x) = exp(-0.5 * d^T H^-1 d) / sqrt((2 pi)^k det H),   d = x - mu

GaussKernel1D:
    p(x) = exp(-0.5 * (x - mu) / h) / (h sqrt(2 pi))

The 1D exponent is linear in (x - mu), not squared; this is the
established behaviour of the 1D kernel and is kept as is. It is not the
normal density for x != mu.
"""

from __future__ import annotations

import math

from numpy.typing import ArrayLike

from pykde.kernels._common import LOG_TWO_PI, TWO_PI, saturating_exp
from pykde.kernels.kernel import Kernel, Kernel1D
from pykde.linalg.vector import Vector


class GaussKernel(Kernel):
    """
    Multivariate Gaussian kernel with smoothing matrix H.

    Falls back to the base density 0.0 (with a RuntimeWarning) when H is
    not positive definite, or when the determinant of H comes out <= 0.
    The determinant uses diagonal cycling, which is exact only up to three
    dimensions, so kernels of four or more dimensions can return 0.0 for
    a positive definite H.
    """

    def probability_at(self, x: Vector | ArrayLike) -> float:
        terms = self._quadratic_terms(x)
        if terms is None:
            return super().probability_at(x)
        quadratic, det = terms
        # Normaliser in log space: (2 pi)^k overflows a float for large k
        log_norm = self.dimensions * LOG_TWO_PI + math.log(det)
        return saturating_exp(-0.5 * (quadratic + log_norm))


class GaussKernel1D(Kernel1D):
    """One-dimensional Gaussian kernel."""

    def probability_at(self, x: float) -> float:
        h, mu = self._h, self._mu
        return (1.0 / (h * math.sqrt(TWO_PI))) * saturating_exp(-0.5 * (float(x) - mu) / h)
