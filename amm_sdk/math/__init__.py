"""Integer math for pair invariants.

- isqrt: bounded-error integer square root for uint256-sized values
- sqrt_k: closed-form invariant of the boosted constant-product curve
"""

from amm_sdk.math.invariant import sqrt_k
from amm_sdk.math.sqrt import isqrt

__all__ = ["isqrt", "sqrt_k"]
