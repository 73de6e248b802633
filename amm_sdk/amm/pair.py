"""Two-token pair aggregate.

A Pair is an immutable snapshot of a pool: canonically ordered reserves,
a fee and the curve parameters. Queries read the snapshot; swap quotes
return the output together with a *new* Pair holding the post-trade
reserves, leaving the original untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from amm_sdk.amm import swap
from amm_sdk.amm.address import compute_pair_address
from amm_sdk.config import DEFAULT_PAIR_CONFIG, PairConfig
from amm_sdk.constants import DEFAULT_FEE_BPS, LIQUIDITY_TOKEN_DECIMALS, NO_BOOST
from amm_sdk.errors import InvalidCurveParametersError, TokenNotInPairError
from amm_sdk.math.invariant import sqrt_k, validate_boosts
from amm_sdk.models.amounts import Price, TokenAmount
from amm_sdk.models.token import Token

logger = structlog.get_logger()


@dataclass(frozen=True, init=False)
class Pair:
    """A liquidity pair on the classic or boosted constant-product curve.

    token0 is always the token whose address sorts first, whatever order
    the amounts are passed in. boost0/boost1 are the boosts of the token0
    and token1 sides; they only take effect when use_boosted_curve is set.

    Attributes:
        token_amounts: (reserve0, reserve1) in canonical order
        use_boosted_curve: Trade on the boosted curve instead of x*y=k
        fee_bps: Fee in basis points (30 = 0.3%)
        boost0: Boost factor of the token0 side (>= 1)
        boost1: Boost factor of the token1 side (>= 1)
        config: Factory parameters for address and LP token derivation
    """

    token_amounts: tuple[TokenAmount, TokenAmount]
    use_boosted_curve: bool
    fee_bps: int
    boost0: int
    boost1: int
    config: PairConfig = field(compare=False, repr=False)

    def __init__(
        self,
        amount_a: TokenAmount,
        amount_b: TokenAmount,
        use_boosted_curve: bool = False,
        fee_bps: int = DEFAULT_FEE_BPS,
        boost0: int = NO_BOOST,
        boost1: int = NO_BOOST,
        config: PairConfig | None = None,
    ) -> None:
        """Create a pair from two reserves.

        Raises:
            ChainMismatchError: If the tokens are on different chains
            IdenticalTokensError: If both amounts are of the same token
            InvalidCurveParametersError: If the fee or boosts are invalid
        """
        # sorts_before raises on chain mismatch before anything is stored
        if amount_a.token.sorts_before(amount_b.token):
            token_amounts = (amount_a, amount_b)
        else:
            token_amounts = (amount_b, amount_a)

        swap.fee_multiplier(fee_bps)  # validates range
        if use_boosted_curve:
            validate_boosts(boost0, boost1)
        elif boost0 < NO_BOOST or boost1 < NO_BOOST:
            raise InvalidCurveParametersError(f"Boost factors must be >= 1: ({boost0}, {boost1})")

        object.__setattr__(self, "token_amounts", token_amounts)
        object.__setattr__(self, "use_boosted_curve", use_boosted_curve)
        object.__setattr__(self, "fee_bps", fee_bps)
        object.__setattr__(self, "boost0", boost0)
        object.__setattr__(self, "boost1", boost1)
        object.__setattr__(self, "config", config or DEFAULT_PAIR_CONFIG)

    @staticmethod
    def get_address(token_a: Token, token_b: Token, config: PairConfig | None = None) -> str:
        """CREATE2 address of the pair for two tokens (order independent)."""
        return compute_pair_address(token_a, token_b, config)

    @property
    def address(self) -> str:
        return compute_pair_address(self.token0, self.token1, self.config)

    @property
    def liquidity_token(self) -> Token:
        """The pair's LP token."""
        return Token(
            self.chain_id,
            self.address,
            LIQUIDITY_TOKEN_DECIMALS,
            self.config.liquidity_token_symbol,
            self.config.liquidity_token_name,
        )

    @property
    def token0(self) -> Token:
        return self.token_amounts[0].token

    @property
    def token1(self) -> Token:
        return self.token_amounts[1].token

    @property
    def reserve0(self) -> TokenAmount:
        return self.token_amounts[0]

    @property
    def reserve1(self) -> TokenAmount:
        return self.token_amounts[1]

    @property
    def chain_id(self) -> int:
        return self.token0.chain_id

    @property
    def boost(self) -> int:
        """Boost used by the curve math (1 on the classic curve)."""
        return self.boost0 if self.use_boosted_curve else NO_BOOST

    @property
    def sqrt_k(self) -> int:
        """Square root of the invariant for the current reserves."""
        return sqrt_k(self.reserve0.raw, self.reserve1.raw, self.boost, self.boost)

    def involves_token(self, token: Token) -> bool:
        return token == self.token0 or token == self.token1

    def reserve_of(self, token: Token) -> TokenAmount:
        """Reserve of the given token.

        Raises:
            TokenNotInPairError: If token is not in the pair
        """
        if token == self.token0:
            return self.reserve0
        if token == self.token1:
            return self.reserve1
        raise TokenNotInPairError(f"Token {token} not in pair {self.token0}/{self.token1}")

    @property
    def token0_price(self) -> Price:
        """Price of token0 in token1 (reserve1 / reserve0)."""
        return Price(self.token0, self.token1, self.reserve1.raw, self.reserve0.raw)

    @property
    def token1_price(self) -> Price:
        """Price of token1 in token0 (reserve0 / reserve1)."""
        return Price(self.token1, self.token0, self.reserve0.raw, self.reserve1.raw)

    def price_of(self, token: Token) -> Price:
        """Spot price of token in terms of the other token.

        Uses the raw reserve ratio for both curve types.

        Raises:
            TokenNotInPairError: If token is not in the pair
        """
        if token == self.token0:
            return self.token0_price
        if token == self.token1:
            return self.token1_price
        raise TokenNotInPairError(f"Token {token} not in pair {self.token0}/{self.token1}")

    def _other(self, token: Token) -> Token:
        return self.token1 if token == self.token0 else self.token0

    def _with_reserves(self, amount_a: TokenAmount, amount_b: TokenAmount) -> Pair:
        return Pair(
            amount_a,
            amount_b,
            self.use_boosted_curve,
            self.fee_bps,
            self.boost0,
            self.boost1,
            self.config,
        )

    def get_output_amount(self, input_amount: TokenAmount) -> tuple[TokenAmount, Pair]:
        """Quote an exact-input swap.

        The fee stays in the pool: the returned pair's input reserve grows by
        the full input, while only the post-fee part moves along the curve.

        Args:
            input_amount: Amount of token0 or token1 sent to the pool

        Returns:
            Tuple of (output amount, pair with post-trade reserves)

        Raises:
            TokenNotInPairError: If the input token is not in the pair
            InsufficientInputAmountError: If the input is zero
            DegenerateInvariantError: If a reserve is empty
            InsufficientReservesError: If the trade would drain the output side
        """
        reserve_in = self.reserve_of(input_amount.token)
        reserve_out = self.reserve_of(self._other(input_amount.token))

        amount_out = swap.get_amount_out(
            input_amount.raw, reserve_in.raw, reserve_out.raw, self.fee_bps, self.boost
        )
        output_amount = TokenAmount(reserve_out.token, amount_out)

        logger.debug(
            "swap_quoted",
            token_in=input_amount.token.address,
            token_out=reserve_out.token.address,
            amount_in=input_amount.raw,
            amount_out=amount_out,
            boost=self.boost,
            fee_bps=self.fee_bps,
        )
        return output_amount, self._with_reserves(
            reserve_in.add(input_amount), reserve_out.subtract(output_amount)
        )

    def get_input_amount(self, output_amount: TokenAmount) -> tuple[TokenAmount, Pair]:
        """Quote an exact-output swap.

        Args:
            output_amount: Amount of token0 or token1 to receive

        Returns:
            Tuple of (required input amount, pair with post-trade reserves)

        Raises:
            TokenNotInPairError: If the output token is not in the pair
            InsufficientInputAmountError: If the output is zero
            DegenerateInvariantError: If a reserve is empty
            InsufficientReservesError: If the output is not below the reserve
        """
        reserve_out = self.reserve_of(output_amount.token)
        reserve_in = self.reserve_of(self._other(output_amount.token))

        amount_in = swap.get_amount_in(
            output_amount.raw, reserve_in.raw, reserve_out.raw, self.fee_bps, self.boost
        )
        input_amount = TokenAmount(reserve_in.token, amount_in)

        logger.debug(
            "swap_quoted_exact_output",
            token_in=reserve_in.token.address,
            token_out=output_amount.token.address,
            amount_in=amount_in,
            amount_out=output_amount.raw,
            boost=self.boost,
            fee_bps=self.fee_bps,
        )
        return input_amount, self._with_reserves(
            reserve_in.add(input_amount), reserve_out.subtract(output_amount)
        )
