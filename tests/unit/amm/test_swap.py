"""Tests for swap quotes on classic and boosted curves."""

import pytest

from amm_sdk import (
    DegenerateInvariantError,
    InsufficientInputAmountError,
    InsufficientReservesError,
    InvalidCurveParametersError,
    Pair,
    ReserveOverflowError,
    TokenAmount,
    TokenNotInPairError,
)
from amm_sdk.amm import get_amount_in, get_amount_out
from amm_sdk.amm.swap import fee_multiplier
from amm_sdk.models.types import UINT256_MAX
from tests.helpers import DAI, ONE, USDC, WETH_MAINNET, make_boosted_pair, make_pair


class TestClassicOutputAmount:
    """Exact-input quotes on x * y = k."""

    def test_known_output(self, classic_pair: Pair):
        """1 USDC into 100/100 at 30 bps."""
        output, _ = classic_pair.get_output_amount(TokenAmount(USDC, ONE))
        assert output == TokenAmount(DAI, 987158034397061298)

    def test_returned_pair_has_post_trade_reserves(self, classic_pair: Pair):
        """Input reserve keeps the full input (fee stays in the pool)."""
        output, new_pair = classic_pair.get_output_amount(TokenAmount(USDC, ONE))
        assert new_pair.reserve_of(USDC) == TokenAmount(USDC, 101 * ONE)
        assert new_pair.reserve_of(DAI) == TokenAmount(DAI, 100 * ONE - output.raw)
        assert new_pair.fee_bps == classic_pair.fee_bps

    def test_original_pair_unchanged(self, classic_pair: Pair):
        before = classic_pair.reserve_of(USDC), classic_pair.reserve_of(DAI)
        classic_pair.get_output_amount(TokenAmount(USDC, ONE))
        assert (classic_pair.reserve_of(USDC), classic_pair.reserve_of(DAI)) == before

    def test_invariant_does_not_decrease(self, classic_pair: Pair):
        _, new_pair = classic_pair.get_output_amount(TokenAmount(DAI, 3 * ONE))
        assert new_pair.reserve0.raw * new_pair.reserve1.raw >= (100 * ONE) ** 2

    def test_zero_fee_output(self):
        pair = make_pair(USDC, 100, DAI, 100, fee_bps=0)
        output, _ = pair.get_output_amount(TokenAmount(USDC, 100))
        assert output.raw == 50

    def test_dust_input_gives_zero(self, classic_pair: Pair):
        """Fee truncation can swallow a 1-unit input entirely."""
        output, _ = classic_pair.get_output_amount(TokenAmount(USDC, 1))
        assert output.raw == 0


class TestBoostedOutputAmount:
    """Exact-input quotes on the boosted curve."""

    def test_less_slippage_than_classic(self, classic_pair: Pair, boosted_pair: Pair):
        """Balanced reserves: boosted output sits between classic and the fee-only amount."""
        classic_out, _ = classic_pair.get_output_amount(TokenAmount(USDC, ONE))
        boosted_out, _ = boosted_pair.get_output_amount(TokenAmount(USDC, ONE))
        after_fee = ONE * 9970 // 10000
        assert classic_out.raw < boosted_out.raw < after_fee

    def test_boost_one_matches_classic(self):
        boosted = make_boosted_pair(USDC, 40 * ONE, DAI, 10 * ONE, boost=1)
        classic = make_pair(USDC, 40 * ONE, DAI, 10 * ONE)
        amount = TokenAmount(DAI, 2 * ONE)
        assert boosted.get_output_amount(amount)[0] == classic.get_output_amount(amount)[0]

    def test_virtual_invariant_preserved(self, skewed_boosted_pair: Pair):
        """Post-trade virtual reserves stay on or above the pre-trade curve."""
        boost = 10
        s = skewed_boosted_pair.sqrt_k
        offset = (boost - 1) * s
        amount_in = 5 * ONE
        output, _ = skewed_boosted_pair.get_output_amount(TokenAmount(DAI, amount_in))
        after_fee = amount_in * 9970 // 10000
        new_dai = 10 * ONE + after_fee
        new_usdc = 40 * ONE - output.raw
        assert (new_dai + offset) * (new_usdc + offset) >= (boost * s) ** 2

    def test_draining_trade_rejected(self, boosted_pair: Pair):
        """The boosted curve reaches zero real reserve for finite input."""
        with pytest.raises(InsufficientReservesError):
            boosted_pair.get_output_amount(TokenAmount(USDC, 200 * ONE))

    def test_draining_error_is_curve_error(self, boosted_pair: Pair):
        with pytest.raises(InvalidCurveParametersError):
            boosted_pair.get_output_amount(TokenAmount(USDC, 200 * ONE))


class TestMonotonicity:
    """Output grows with input and never reaches the reserve."""

    @pytest.mark.parametrize("pair_fixture", ["classic_pair", "boosted_pair", "skewed_boosted_pair"])
    def test_strictly_increasing_and_bounded(self, pair_fixture: str, request: pytest.FixtureRequest):
        pair: Pair = request.getfixturevalue(pair_fixture)
        reserve_out = pair.reserve_of(DAI).raw
        previous = -1
        for amount in [10**12, 10**15, ONE, 3 * ONE, 8 * ONE]:
            output, _ = pair.get_output_amount(TokenAmount(USDC, amount))
            assert previous < output.raw < reserve_out
            previous = output.raw

    def test_classic_never_drains(self, classic_pair: Pair):
        output, _ = classic_pair.get_output_amount(TokenAmount(USDC, 10**40))
        assert output.raw < 100 * ONE


class TestExactOutput:
    """get_input_amount is the rounded-up inverse of get_output_amount."""

    @pytest.mark.parametrize("pair_fixture", ["classic_pair", "boosted_pair", "skewed_boosted_pair"])
    @pytest.mark.parametrize("wanted", [10**6, ONE // 3, 2 * ONE])
    def test_input_buys_at_least_requested(
        self, pair_fixture: str, wanted: int, request: pytest.FixtureRequest
    ):
        pair: Pair = request.getfixturevalue(pair_fixture)
        input_amount, _ = pair.get_input_amount(TokenAmount(DAI, wanted))
        assert input_amount.token == USDC
        output, _ = pair.get_output_amount(input_amount)
        assert output.raw >= wanted

    def test_classic_input_is_tight(self, classic_pair: Pair):
        """One unit less input falls short of the requested output."""
        wanted = 987158034397061298
        input_amount, _ = classic_pair.get_input_amount(TokenAmount(DAI, wanted))
        short, _ = classic_pair.get_output_amount(TokenAmount(USDC, input_amount.raw - 1))
        assert short.raw < wanted

    def test_returned_pair(self, classic_pair: Pair):
        input_amount, new_pair = classic_pair.get_input_amount(TokenAmount(DAI, ONE))
        assert new_pair.reserve_of(DAI).raw == 99 * ONE
        assert new_pair.reserve_of(USDC).raw == 100 * ONE + input_amount.raw

    def test_output_at_reserve_rejected(self, classic_pair: Pair):
        with pytest.raises(InsufficientReservesError):
            classic_pair.get_input_amount(TokenAmount(DAI, 100 * ONE))

    def test_zero_output_rejected(self, classic_pair: Pair):
        with pytest.raises(InsufficientInputAmountError):
            classic_pair.get_input_amount(TokenAmount(DAI, 0))


class TestSwapErrors:
    """Failures leave nothing half-done."""

    def test_foreign_input_token(self, classic_pair: Pair):
        with pytest.raises(TokenNotInPairError):
            classic_pair.get_output_amount(TokenAmount(WETH_MAINNET, ONE))

    def test_foreign_output_token(self, classic_pair: Pair):
        with pytest.raises(TokenNotInPairError):
            classic_pair.get_input_amount(TokenAmount(WETH_MAINNET, ONE))

    def test_zero_input(self, classic_pair: Pair):
        with pytest.raises(InsufficientInputAmountError):
            classic_pair.get_output_amount(TokenAmount(USDC, 0))

    @pytest.mark.parametrize("boosted", [False, True])
    def test_empty_reserve(self, boosted: bool):
        pair = Pair(TokenAmount(USDC, 0), TokenAmount(DAI, 100 * ONE), boosted, 30, 10, 10)
        with pytest.raises(DegenerateInvariantError):
            pair.get_output_amount(TokenAmount(DAI, ONE))

    @pytest.mark.parametrize("pair_fixture", ["classic_pair", "boosted_pair"])
    def test_input_overflowing_reserve(self, pair_fixture: str, request: pytest.FixtureRequest):
        """A valid uint256 input that would push the reserve past 2^256-1 is rejected."""
        pair: Pair = request.getfixturevalue(pair_fixture)
        with pytest.raises(ReserveOverflowError):
            pair.get_output_amount(TokenAmount(USDC, UINT256_MAX))

    def test_input_overflow_is_curve_error(self, classic_pair: Pair):
        with pytest.raises(InvalidCurveParametersError):
            classic_pair.get_output_amount(TokenAmount(USDC, UINT256_MAX - 100 * ONE + 1))

    def test_input_filling_reserve_to_max(self, classic_pair: Pair):
        amount_in = UINT256_MAX - 100 * ONE
        amount_out, new_pair = classic_pair.get_output_amount(TokenAmount(USDC, amount_in))
        assert 0 < amount_out.raw < 100 * ONE
        assert new_pair.reserve_of(USDC).raw == UINT256_MAX

    def test_required_input_overflowing_reserve(self):
        pair = make_pair(USDC, 2**255, DAI, 100 * ONE)
        with pytest.raises(ReserveOverflowError):
            pair.get_input_amount(TokenAmount(DAI, 100 * ONE - 1))


class TestSwapFunctions:
    """Module-level swap math on plain integers."""

    def test_get_amount_out_matches_pair(self):
        assert get_amount_out(ONE, 100 * ONE, 100 * ONE, 30) == 987158034397061298

    def test_get_amount_in_round_trip(self):
        amount_in = get_amount_in(ONE, 100 * ONE, 250 * ONE, 30, boost=22)
        assert get_amount_out(amount_in, 100 * ONE, 250 * ONE, 30, boost=22) >= ONE

    def test_fee_multiplier(self):
        assert fee_multiplier(30) == 9970
        assert fee_multiplier(25) == 9975
        with pytest.raises(InvalidCurveParametersError):
            fee_multiplier(10_000)

    def test_invalid_boost(self):
        with pytest.raises(InvalidCurveParametersError):
            get_amount_out(ONE, 100 * ONE, 100 * ONE, 30, boost=0)

    def test_reserve_overflow(self):
        with pytest.raises(ReserveOverflowError):
            get_amount_out(UINT256_MAX, ONE, ONE, 30)
        with pytest.raises(ReserveOverflowError):
            get_amount_in(ONE - 1, 2**255, ONE, 30)
