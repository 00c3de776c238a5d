"""
Shared helpers for kernel densities.
"""

import math
import warnings

import numpy as np

TWO_PI = 2.0 * math.pi
LOG_TWO_PI = math.log(TWO_PI)

# Base density returned where a kernel's density is undefined
BASE_DENSITY = 0.0


def saturating_exp(x: float) -> float:
    """exp(x) that overflows to inf instead of raising."""
    with np.errstate(over='ignore'):
        return float(np.exp(x))


def warn_degenerate(kernel_name: str, reason: str) -> None:
    """Report that a density fell back to the base value."""
    warnings.warn(
        f"{kernel_name}: smoothing matrix is degenerate ({reason}); "
        f"returning base density {BASE_DENSITY}",
        RuntimeWarning,
        stacklevel=4,
    )
