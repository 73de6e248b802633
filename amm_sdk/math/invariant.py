"""Closed-form invariant for the boosted constant-product curve.

A boosted pool trades along a constant-product curve over *virtual*
reserves, each real reserve shifted by (B - 1) * sqrtK:

    (a + m*s) * (b + m*s) = (B*s)^2,   m = B - 1,  s = sqrtK

Although s appears on both sides, expanding gives a plain quadratic

    (2B - 1)*s^2 - m*(a + b)*s - a*b = 0

whose non-negative root is

    s = [m*(a + b) + sqrt(m^2*(a + b)^2 + 4*(2B - 1)*a*b)] / (2*(2B - 1))

With B = 1 this collapses to s = sqrt(a*b), the classic invariant.

All arithmetic is integer; the only rounding comes from isqrt and the
final floor division, so s never exceeds the true root.
"""

from amm_sdk.constants import NO_BOOST
from amm_sdk.errors import InvalidCurveParametersError
from amm_sdk.math.sqrt import isqrt
from amm_sdk.safe_int import S


def validate_boosts(boost0: int, boost1: int) -> int:
    """Return the common boost factor.

    Raises:
        InvalidCurveParametersError: If a boost is below 1 or the two differ
    """
    if boost0 < NO_BOOST or boost1 < NO_BOOST:
        raise InvalidCurveParametersError(f"Boost factors must be >= 1: ({boost0}, {boost1})")
    if boost0 != boost1:
        # The two-sided generalization of the invariant is not defined here
        raise InvalidCurveParametersError(
            f"Asymmetric boost is not supported: boost0={boost0}, boost1={boost1}"
        )
    return boost0


def sqrt_k(reserve0: int, reserve1: int, boost0: int = NO_BOOST, boost1: int = NO_BOOST) -> int:
    """Square root of the invariant K for the given reserves and boost.

    Args:
        reserve0: Raw reserve of token0
        reserve1: Raw reserve of token1
        boost0: Boost factor of the token0 side (>= 1)
        boost1: Boost factor of the token1 side (>= 1, equal to boost0)

    Returns:
        sqrtK rounded down; 0 if either reserve is empty

    Raises:
        InvalidCurveParametersError: If the boosts are invalid
        ValueError: If a reserve is negative
    """
    boost = validate_boosts(boost0, boost1)
    if reserve0 < 0 or reserve1 < 0:
        raise ValueError(f"Reserves cannot be negative: ({reserve0}, {reserve1})")
    if reserve0 == 0 or reserve1 == 0:
        return 0

    a, b = S(reserve0), S(reserve1)
    if boost == NO_BOOST:
        return isqrt((a * b).value)

    m = S(boost - 1)
    leading = S(2 * boost - 1)
    linear = m * (a + b)
    discriminant = linear * linear + S(4) * leading * a * b
    root = linear + S(isqrt(discriminant.value))
    return (root // (S(2) * leading)).value
