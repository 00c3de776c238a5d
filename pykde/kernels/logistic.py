"""
Logistic kernels.

LogisticKernel (N-D), with C = d^T H^-1 d and d = x - mu:
    p(x) = 1 / (sqrt(det H) * (2 + exp(C) + exp(-C)))

LogisticKernel1D, with z = (x - mu) / h:
    p(x) = 1 / (h * (2 + exp(z) + exp(-z)))
"""

from __future__ import annotations

import math

from numpy.typing import ArrayLike

from pykde.kernels._common import saturating_exp
from pykde.kernels.kernel import Kernel, Kernel1D
from pykde.linalg.vector import Vector


def _logistic_denominator(c: float) -> float:
    return 2.0 + saturating_exp(c) + saturating_exp(-c)


class LogisticKernel(Kernel):
    """
    Multivariate logistic kernel with smoothing matrix H.

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
        return 1.0 / (math.sqrt(det) * _logistic_denominator(quadratic))


class LogisticKernel1D(Kernel1D):
    """One-dimensional logistic kernel."""

    def probability_at(self, x: float) -> float:
        h, mu = self._h, self._mu
        return 1.0 / (h * _logistic_denominator((float(x) - mu) / h))
