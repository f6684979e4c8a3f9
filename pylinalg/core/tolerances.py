"""
Tolerance tiers for approximate comparison.

Defines the precision expectations used by Vector.allclose and
Matrix.allclose:
- EXACT: bit-for-bit equality
- FP64: double precision arithmetic, allowing for accumulated rounding

Used by the public allclose methods and by the test suite.
"""

from dataclasses import dataclass

from pylinalg.core.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# No rounding allowed
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact equality, no rounding allowed',
)

# Double precision with a few operations' worth of rounding
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, accumulated rounding allowed',
)

DEFAULT_TOLERANCE = FP64

_TIERS = {tier.name: tier for tier in (EXACT, FP64)}


def select_tolerance(name: str) -> ToleranceTier:
    """Look up a tolerance tier by name."""
    try:
        return _TIERS[name]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown tolerance tier {name!r}, expected one of {sorted(_TIERS)}"
        ) from None
