"""Error classes for pair math and value objects.

All errors are raised synchronously at the offending call and never leave
a Pair in a partially updated state (Pairs are immutable).
"""


class AmmError(Exception):
    """Base error for AMM pricing operations."""

    pass


class ChainMismatchError(AmmError):
    """Tokens belong to different chains."""

    pass


class IdenticalTokensError(AmmError):
    """Both sides of a pair are the same token."""

    pass


class TokenMismatchError(AmmError):
    """Arithmetic between amounts or prices of different tokens."""

    pass


class TokenNotInPairError(AmmError):
    """Token is neither token0 nor token1 of the pair."""

    pass


class InvalidCurveParametersError(AmmError):
    """Fee or boost configuration cannot describe a valid curve."""

    pass


class InsufficientReservesError(InvalidCurveParametersError):
    """Swap would drain (or overdraw) the output-side reserve."""

    pass


class DegenerateInvariantError(AmmError):
    """A reserve is zero, so the invariant and prices are undefined."""

    pass


class InsufficientInputAmountError(AmmError):
    """Swap amount must be strictly positive."""

    pass


class ReserveOverflowError(InvalidCurveParametersError):
    """Swap would push the input-side reserve past uint256."""

    pass
