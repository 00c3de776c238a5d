"""
Tolerance tiers for numerical validation.

Defines precision expectations for the hand-written Cholesky engine:
- EXACT: small integer-valued problems whose factors are exact in float64
- CPU FP64: well-conditioned double precision
- CPU FP64 ill-conditioned: relaxed for cond > 1e4

Used by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """rtol/atol pair for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Integer-valued inputs with exact factors (e.g. the 3x3 textbook example)
EXACT = ToleranceTier(
    rtol=0.0,
    atol=1e-12,
    name='exact',
    description='Exact arithmetic up to float64 rounding',
)

# Well-conditioned double precision
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, well-conditioned',
)

# Ill-conditioned problems (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)

# Condition number above which CPU_FP64_ILL_CONDITIONED applies
ILL_CONDITIONED_THRESHOLD = 1e4


def select_tolerance(condition_number: float = 1.0, exact: bool = False) -> ToleranceTier:
    """Select appropriate tolerance tier for a problem."""
    if exact:
        return EXACT
    if condition_number > ILL_CONDITIONED_THRESHOLD:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
