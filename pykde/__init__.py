"""
pykde: exact dense linear algebra and kernel densities.

Cholesky-based solve, inverse and determinant on small dense matrices,
and Gaussian/Logistic kernel densities built on top of them.

Submodules:
    linalg: Vector, Matrix and the solve family
    kernels: Kernel, GaussKernel, LogisticKernel (N-D and 1D)
    core: Result envelope, exceptions, validation, compute utilities
"""

__version__ = "0.1.0"

from pykde import linalg
from pykde import kernels
from pykde.core import Failure, Result
from pykde.linalg import Matrix, Vector
from pykde.kernels import (
    GaussKernel,
    GaussKernel1D,
    Kernel,
    Kernel1D,
    LogisticKernel,
    LogisticKernel1D,
)

__all__ = [
    "__version__",
    "linalg",
    "kernels",
    "Failure",
    "Result",
    "Vector",
    "Matrix",
    "Kernel",
    "Kernel1D",
    "GaussKernel",
    "GaussKernel1D",
    "LogisticKernel",
    "LogisticKernel1D",
]
