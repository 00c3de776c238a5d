"""
Shared compute infrastructure for pykde.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for numerical comparison
"""

from pykde.core.compute.timing import Timer, timed

__all__ = [
    # Timing
    "Timer",
    "timed",
]
