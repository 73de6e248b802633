"""Pricing engine for two-token AMM pairs on classic and boosted curves."""

from amm_sdk.amm.address import compute_pair_address
from amm_sdk.amm.pair import Pair
from amm_sdk.config import DEFAULT_PAIR_CONFIG, PairConfig
from amm_sdk.constants import WETH, ChainId
from amm_sdk.errors import (
    AmmError,
    ChainMismatchError,
    DegenerateInvariantError,
    IdenticalTokensError,
    InsufficientInputAmountError,
    InsufficientReservesError,
    InvalidCurveParametersError,
    ReserveOverflowError,
    TokenMismatchError,
    TokenNotInPairError,
)
from amm_sdk.math import isqrt, sqrt_k
from amm_sdk.models import Price, Token, TokenAmount
from amm_sdk.models.snapshot import PairSnapshot, TokenReserve, parse_pair_snapshot

__all__ = [
    "AmmError",
    "ChainId",
    "ChainMismatchError",
    "DEFAULT_PAIR_CONFIG",
    "DegenerateInvariantError",
    "IdenticalTokensError",
    "InsufficientInputAmountError",
    "InsufficientReservesError",
    "InvalidCurveParametersError",
    "Pair",
    "PairConfig",
    "PairSnapshot",
    "Price",
    "ReserveOverflowError",
    "Token",
    "TokenAmount",
    "TokenMismatchError",
    "TokenNotInPairError",
    "TokenReserve",
    "WETH",
    "compute_pair_address",
    "isqrt",
    "parse_pair_snapshot",
    "sqrt_k",
]
