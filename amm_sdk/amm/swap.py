"""Swap math for classic and boosted constant-product curves.

Classic curve (boost 1): x * y = k over real reserves.
Boosted curve (boost B > 1): the same product over virtual reserves
x + (B-1)*s and y + (B-1)*s, where s = sqrtK is fixed from the pre-trade
reserves (see amm_sdk.math.invariant).

The fee is taken from the input leg before it touches the curve:
amount_in_after_fee = amount_in * (10000 - fee_bps) // 10000. Every other
rounding step favours the pool.
"""

from amm_sdk.constants import FEE_DENOMINATOR, NO_BOOST
from amm_sdk.errors import (
    DegenerateInvariantError,
    InsufficientInputAmountError,
    InsufficientReservesError,
    InvalidCurveParametersError,
    ReserveOverflowError,
)
from amm_sdk.math.invariant import sqrt_k
from amm_sdk.models.types import UINT256_MAX
from amm_sdk.safe_int import S


def fee_multiplier(fee_bps: int) -> int:
    """Share of the input that reaches the curve, out of FEE_DENOMINATOR.

    For 30 bps (0.3%) this returns 9970.

    Raises:
        InvalidCurveParametersError: If fee_bps is outside [0, 10000)
    """
    if not 0 <= fee_bps < FEE_DENOMINATOR:
        raise InvalidCurveParametersError(f"fee_bps must be in [0, {FEE_DENOMINATOR}): {fee_bps}")
    return FEE_DENOMINATOR - fee_bps


def _check_reserves(reserve_in: int, reserve_out: int) -> None:
    if reserve_in <= 0 or reserve_out <= 0:
        raise DegenerateInvariantError(f"Empty reserve: reserve_in={reserve_in}, reserve_out={reserve_out}")


def _check_input_reserve(amount_in: int, reserve_in: int) -> None:
    if reserve_in + amount_in > UINT256_MAX:
        raise ReserveOverflowError(
            f"Input {amount_in} would overflow input reserve {reserve_in} past 2^256-1"
        )


def get_amount_out(
    amount_in: int,
    reserve_in: int,
    reserve_out: int,
    fee_bps: int,
    boost: int = NO_BOOST,
) -> int:
    """Output amount for an exact input.

    Classic: out = in_after_fee * R_out // (R_in + in_after_fee)
    Boosted: out = R_out - (ceil((B*s)^2 / (R_in + in_after_fee + m*s)) - m*s)

    Args:
        amount_in: Gross input amount (before fee)
        reserve_in: Reserve of the input token
        reserve_out: Reserve of the output token
        fee_bps: Pool fee in basis points
        boost: Common boost factor (1 for the classic curve)

    Returns:
        Output amount, always in [0, reserve_out)

    Raises:
        InsufficientInputAmountError: If amount_in is not positive
        DegenerateInvariantError: If a reserve is empty
        InsufficientReservesError: If the trade would drain the output reserve
        ReserveOverflowError: If the input reserve would exceed 2^256-1
        InvalidCurveParametersError: If fee or boost are invalid
    """
    if amount_in <= 0:
        raise InsufficientInputAmountError(f"Input amount must be positive: {amount_in}")
    _check_reserves(reserve_in, reserve_out)
    _check_input_reserve(amount_in, reserve_in)
    amount_in_after_fee = (S(amount_in) * S(fee_multiplier(fee_bps))) // S(FEE_DENOMINATOR)

    if boost == NO_BOOST:
        # Exact product, no sqrt involved
        numerator = amount_in_after_fee * S(reserve_out)
        denominator = S(reserve_in) + amount_in_after_fee
        return (numerator // denominator).value

    s = S(sqrt_k(reserve_in, reserve_out, boost, boost))
    offset = S(boost - 1) * s
    virtual_k = (S(boost) * s) * (S(boost) * s)
    new_virtual_out = virtual_k.ceiling_div(S(reserve_in) + amount_in_after_fee + offset)
    if new_virtual_out <= offset:
        raise InsufficientReservesError(
            f"Input {amount_in} would drain output reserve {reserve_out} (boost={boost})"
        )
    new_reserve_out = new_virtual_out - offset
    if new_reserve_out > reserve_out:
        raise InvalidCurveParametersError(
            f"Negative output: new reserve {new_reserve_out.value} exceeds {reserve_out}"
        )
    return (S(reserve_out) - new_reserve_out).value


def get_amount_in(
    amount_out: int,
    reserve_in: int,
    reserve_out: int,
    fee_bps: int,
    boost: int = NO_BOOST,
) -> int:
    """Gross input required to receive at least amount_out.

    Rounds up at every step, so get_amount_out(get_amount_in(x)) >= x.

    Raises:
        InsufficientInputAmountError: If amount_out is not positive
        DegenerateInvariantError: If a reserve is empty
        InsufficientReservesError: If amount_out is not below reserve_out
        ReserveOverflowError: If the input reserve would exceed 2^256-1
        InvalidCurveParametersError: If fee or boost are invalid
    """
    if amount_out <= 0:
        raise InsufficientInputAmountError(f"Output amount must be positive: {amount_out}")
    _check_reserves(reserve_in, reserve_out)
    if amount_out >= reserve_out:
        raise InsufficientReservesError(f"Requested {amount_out} but reserve is {reserve_out}")
    multiplier = fee_multiplier(fee_bps)
    new_reserve_out = S(reserve_out) - S(amount_out)

    if boost == NO_BOOST:
        amount_in_after_fee = (S(reserve_in) * S(amount_out)).ceiling_div(new_reserve_out)
    else:
        s = S(sqrt_k(reserve_in, reserve_out, boost, boost))
        offset = S(boost - 1) * s
        virtual_k = (S(boost) * s) * (S(boost) * s)
        new_virtual_in = virtual_k.ceiling_div(new_reserve_out + offset)
        # sqrtK rounds down, so very small outputs can already be covered by the slack
        if new_virtual_in <= S(reserve_in) + offset:
            amount_in_after_fee = S(0)
        else:
            amount_in_after_fee = new_virtual_in - offset - S(reserve_in)

    amount_in = max((amount_in_after_fee * S(FEE_DENOMINATOR)).ceiling_div(S(multiplier)).value, 1)
    _check_input_reserve(amount_in, reserve_in)
    return amount_in
