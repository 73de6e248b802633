"""Tests for TokenAmount and Price."""

from decimal import Decimal

import pytest

from amm_sdk import DegenerateInvariantError, Price, TokenAmount, TokenMismatchError
from tests.helpers import DAI, ONE, USDC, USDC6, WETH_MAINNET


class TestTokenAmount:
    """Raw quantities and same-token arithmetic."""

    def test_equality(self):
        assert TokenAmount(DAI, 101) == TokenAmount(DAI, 101)
        assert TokenAmount(DAI, 101) != TokenAmount(DAI, 100)
        assert TokenAmount(DAI, 101) != TokenAmount(USDC, 101)

    def test_accepts_decimal_string(self):
        assert TokenAmount(DAI, "1000000000000000000").raw == ONE  # type: ignore[arg-type]

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="negative"):
            TokenAmount(DAI, -1)

    def test_uint256_overflow_rejected(self):
        with pytest.raises(ValueError, match="overflow"):
            TokenAmount(DAI, 2**256)

    def test_add_and_subtract(self):
        assert TokenAmount(DAI, 5).add(TokenAmount(DAI, 3)) == TokenAmount(DAI, 8)
        assert TokenAmount(DAI, 5).subtract(TokenAmount(DAI, 3)) == TokenAmount(DAI, 2)

    def test_subtract_below_zero_rejected(self):
        with pytest.raises(ValueError):
            TokenAmount(DAI, 3).subtract(TokenAmount(DAI, 5))

    def test_mixed_tokens_rejected(self):
        with pytest.raises(TokenMismatchError):
            TokenAmount(DAI, 5).add(TokenAmount(USDC, 3))

    def test_to_exact(self):
        assert TokenAmount(USDC6, 1_234_567).to_exact() == Decimal("1.234567")
        assert TokenAmount(DAI, 987158034397061298).to_exact() == Decimal("0.987158034397061298")

    def test_to_significant(self):
        assert TokenAmount(USDC6, 1_234_567).to_significant(3) == "1.23"
        assert TokenAmount(USDC6, 1_235_000).to_significant(3) == "1.24"

    def test_to_fixed(self):
        assert TokenAmount(USDC6, 1_234_567).to_fixed(2) == "1.23"
        assert TokenAmount(USDC6, 1_000_000).to_fixed(3) == "1.000"

    def test_to_fixed_beyond_decimals_rejected(self):
        with pytest.raises(ValueError):
            TokenAmount(USDC6, 1).to_fixed(7)


class TestPrice:
    """Unreduced rational prices."""

    def test_unreduced_equality(self):
        assert Price(DAI, USDC, 2, 4) == Price(DAI, USDC, 2, 4)
        assert Price(DAI, USDC, 2, 4) != Price(DAI, USDC, 1, 2)

    def test_zero_denominator_rejected(self):
        with pytest.raises(DegenerateInvariantError):
            Price(DAI, USDC, 1, 0)

    def test_invert(self):
        assert Price(DAI, USDC, 101, 100).invert() == Price(USDC, DAI, 100, 101)

    def test_raw_and_adjusted(self):
        """2 USDC (6 decimals) per 1 DAI (18 decimals)."""
        price = Price(DAI, USDC6, 2_000_000, ONE)
        assert price.raw == Decimal("2E-12")
        assert price.adjusted == Decimal("2")
        assert price.to_fixed(2) == "2.00"
        assert price.to_significant(4) == "2"

    def test_quote(self):
        price = Price(DAI, USDC6, 2_000_000, ONE)
        assert price.quote(TokenAmount(DAI, 3 * ONE)) == TokenAmount(USDC6, 6_000_000)

    def test_quote_rounds_down(self):
        assert Price(DAI, USDC, 1, 3).quote(TokenAmount(DAI, 10)) == TokenAmount(USDC, 3)

    def test_quote_wrong_token_rejected(self):
        with pytest.raises(TokenMismatchError):
            Price(DAI, USDC, 1, 1).quote(TokenAmount(USDC, 10))

    def test_multiply(self):
        dai_in_usdc = Price(DAI, USDC, 101, 100)
        usdc_in_weth = Price(USDC, WETH_MAINNET, 1, 2000)
        assert dai_in_usdc.multiply(usdc_in_weth) == Price(DAI, WETH_MAINNET, 101, 200_000)

    def test_multiply_mismatch_rejected(self):
        with pytest.raises(TokenMismatchError):
            Price(DAI, USDC, 1, 1).multiply(Price(DAI, WETH_MAINNET, 1, 1))
