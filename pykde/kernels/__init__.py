"""
Kernel densities.

Public API:
    Kernel, Kernel1D                   - base kernels (density 0.0)
    GaussKernel, GaussKernel1D         - Gaussian densities
    LogisticKernel, LogisticKernel1D   - logistic densities

N-D kernels keep their smoothing matrix H = L @ L.T consistent with the
base L under set_center, add_dimension, remove_dimension(_at) and
set_kernel_base_row.
"""

from pykde.kernels.kernel import Kernel, Kernel1D
from pykde.kernels.gauss import GaussKernel, GaussKernel1D
from pykde.kernels.logistic import LogisticKernel, LogisticKernel1D

__all__ = [
    "Kernel",
    "Kernel1D",
    "GaussKernel",
    "GaussKernel1D",
    "LogisticKernel",
    "LogisticKernel1D",
]
