"""TokenAmount and Price value objects.

Both hold raw integer quantities. Decimal is used only for display and
human-scaled views; no curve math goes through it.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal

from amm_sdk.errors import DegenerateInvariantError, TokenMismatchError
from amm_sdk.models.token import Token
from amm_sdk.models.types import validate_uint256

# Wide enough for any uint256 plus 77 decimal places
_CTX = Context(prec=160, rounding=ROUND_HALF_UP)


def _to_significant(value: Decimal, significant_digits: int) -> str:
    if significant_digits <= 0:
        raise ValueError(f"significant_digits must be positive: {significant_digits}")
    rounded = Context(prec=significant_digits, rounding=ROUND_HALF_UP).create_decimal(value)
    return format(rounded, "f")


def _to_fixed(value: Decimal, decimal_places: int) -> str:
    if decimal_places < 0:
        raise ValueError(f"decimal_places cannot be negative: {decimal_places}")
    quantum = Decimal(1).scaleb(-decimal_places)
    return format(value.quantize(quantum, rounding=ROUND_HALF_UP, context=_CTX), "f")


@dataclass(frozen=True)
class TokenAmount:
    """A raw quantity of a token, in the token's smallest unit.

    Attributes:
        token: The token being counted
        raw: Non-negative integer quantity, at most 2**256 - 1
    """

    token: Token
    raw: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw", validate_uint256(self.raw))

    def _check_same_token(self, other: TokenAmount) -> None:
        if self.token != other.token:
            raise TokenMismatchError(f"Cannot combine amounts of {self.token} and {other.token}")

    def add(self, other: TokenAmount) -> TokenAmount:
        """Sum of two amounts of the same token."""
        self._check_same_token(other)
        return TokenAmount(self.token, self.raw + other.raw)

    def subtract(self, other: TokenAmount) -> TokenAmount:
        """Difference of two amounts of the same token.

        Raises:
            TokenMismatchError: If the tokens differ
            ValueError: If the result would be negative
        """
        self._check_same_token(other)
        return TokenAmount(self.token, self.raw - other.raw)

    def to_exact(self) -> Decimal:
        """Amount in whole tokens, without rounding."""
        return Decimal(self.raw).scaleb(-self.token.decimals, context=_CTX)

    def to_significant(self, significant_digits: int = 6) -> str:
        return _to_significant(self.to_exact(), significant_digits)

    def to_fixed(self, decimal_places: int) -> str:
        """Whole-token amount with a fixed number of decimals.

        Raises:
            ValueError: If more places are requested than the token has
        """
        if decimal_places > self.token.decimals:
            raise ValueError(
                f"{decimal_places} decimal places requested, token has {self.token.decimals}"
            )
        return _to_fixed(self.to_exact(), decimal_places)


@dataclass(frozen=True)
class Price:
    """Quote-token raw units per one base-token raw unit.

    The fraction is kept unreduced: Price(A, B, 2, 4) != Price(A, B, 1, 2).

    Attributes:
        base_token: Token being priced
        quote_token: Token the price is expressed in
        numerator: Quote-side raw quantity
        denominator: Base-side raw quantity (must be non-zero)
    """

    base_token: Token
    quote_token: Token
    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        if self.numerator < 0 or self.denominator < 0:
            raise ValueError(f"Price terms cannot be negative: {self.numerator}/{self.denominator}")
        if self.denominator == 0:
            raise DegenerateInvariantError(
                f"Price of {self.base_token} in {self.quote_token} has a zero denominator"
            )

    @property
    def raw(self) -> Decimal:
        """Price in raw units as a Decimal."""
        return _CTX.divide(Decimal(self.numerator), Decimal(self.denominator))

    @property
    def adjusted(self) -> Decimal:
        """Price in whole tokens, corrected for both tokens' decimals."""
        shift = self.base_token.decimals - self.quote_token.decimals
        return self.raw.scaleb(shift, context=_CTX)

    def invert(self) -> Price:
        return Price(self.quote_token, self.base_token, self.denominator, self.numerator)

    def multiply(self, other: Price) -> Price:
        """Chain two prices: (A in B) * (B in C) = (A in C).

        Raises:
            TokenMismatchError: If other is not based in this price's quote token
        """
        if self.quote_token != other.base_token:
            raise TokenMismatchError(
                f"Cannot chain price quoted in {self.quote_token} with price based in {other.base_token}"
            )
        return Price(
            self.base_token,
            other.quote_token,
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def quote(self, amount: TokenAmount) -> TokenAmount:
        """Convert an amount of the base token into the quote token (rounded down).

        Raises:
            TokenMismatchError: If amount is not in the base token
        """
        if amount.token != self.base_token:
            raise TokenMismatchError(f"Price is based in {self.base_token}, got {amount.token}")
        return TokenAmount(self.quote_token, amount.raw * self.numerator // self.denominator)

    def to_significant(self, significant_digits: int = 6) -> str:
        return _to_significant(self.adjusted, significant_digits)

    def to_fixed(self, decimal_places: int = 4) -> str:
        return _to_fixed(self.adjusted, decimal_places)
