"""Pydantic model for reserve snapshots and conversion to Pair.

Whatever layer reads pool state (an indexer, an RPC poller, a fixture
file) hands reserves to the engine in this shape:

    {
        "chainId": 1,
        "tokens": [
            {"address": "0x...", "decimals": 18, "symbol": "DAI", "reserve": "1000..."},
            {"address": "0x...", "decimals": 6, "symbol": "USDC", "reserve": "1000..."}
        ],
        "feeBps": 30,
        "isXybk": true,
        "boost0": 10,
        "boost1": 10
    }

The fee may instead be given as a decimal fraction ("fee": "0.003").
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

import structlog
from pydantic import BaseModel, Field

from amm_sdk.amm.pair import Pair
from amm_sdk.config import DEFAULT_PAIR_CONFIG, PairConfig
from amm_sdk.constants import FEE_DENOMINATOR
from amm_sdk.models.amounts import TokenAmount
from amm_sdk.models.token import Token
from amm_sdk.models.types import Address, Uint256

logger = structlog.get_logger()


class TokenReserve(BaseModel):
    """One side of a pair snapshot."""

    address: Address
    # Some exotic tokens use more than 18 decimals, so allow up to 77 (max for uint256)
    decimals: int = Field(ge=0, le=77)
    symbol: str | None = None
    name: str | None = None
    reserve: Uint256


class PairSnapshot(BaseModel):
    """Reserves and curve parameters of a pair at one point in time."""

    chain_id: int = Field(alias="chainId", gt=0)
    tokens: list[TokenReserve] = Field(min_length=2, max_length=2)
    fee_bps: int | None = Field(default=None, alias="feeBps", ge=0, lt=FEE_DENOMINATOR)
    fee: str | None = Field(default=None, description="Fee as a decimal fraction, e.g. 0.003")
    use_boosted_curve: bool = Field(default=False, alias="isXybk")
    boost0: int = Field(default=1, ge=1)
    boost1: int = Field(default=1, ge=1)

    model_config = {"populate_by_name": True}


def _resolve_fee_bps(snapshot: PairSnapshot, config: PairConfig) -> int:
    if snapshot.fee_bps is not None:
        return snapshot.fee_bps
    if snapshot.fee is None:
        return config.default_fee_bps

    # Decimal keeps "0.003" exact; float would give 29.999...
    try:
        fee_bps = int(
            (Decimal(snapshot.fee) * FEE_DENOMINATOR).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        )
    except (ValueError, InvalidOperation):
        logger.warning(
            "fee_parse_failed",
            raw_fee=snapshot.fee,
            using_default=config.default_fee_bps,
        )
        return config.default_fee_bps

    if not 0 <= fee_bps < FEE_DENOMINATOR:
        logger.warning(
            "fee_out_of_range",
            raw_fee=snapshot.fee,
            fee_bps=fee_bps,
            using_default=config.default_fee_bps,
        )
        return config.default_fee_bps
    return fee_bps


def parse_pair_snapshot(
    snapshot: PairSnapshot | dict[str, Any],
    config: PairConfig | None = None,
) -> Pair:
    """Build a Pair from a snapshot.

    Args:
        snapshot: PairSnapshot or its JSON-shaped dict form
        config: Factory parameters and fallback fee (default: DEFAULT_PAIR_CONFIG)

    Returns:
        Pair with canonically ordered reserves

    Raises:
        pydantic.ValidationError: If the snapshot is malformed
        ChainMismatchError, IdenticalTokensError, InvalidCurveParametersError:
            As raised by Pair construction
    """
    config = config or DEFAULT_PAIR_CONFIG
    if not isinstance(snapshot, PairSnapshot):
        snapshot = PairSnapshot.model_validate(snapshot)

    amounts = [
        TokenAmount(
            Token(snapshot.chain_id, side.address, side.decimals, side.symbol, side.name),
            side.reserve,
        )
        for side in snapshot.tokens
    ]
    pair = Pair(
        amounts[0],
        amounts[1],
        use_boosted_curve=snapshot.use_boosted_curve,
        fee_bps=_resolve_fee_bps(snapshot, config),
        boost0=snapshot.boost0,
        boost1=snapshot.boost1,
        config=config,
    )
    logger.debug(
        "pair_snapshot_parsed",
        token0=pair.token0.address,
        token1=pair.token1.address,
        fee_bps=pair.fee_bps,
        boosted=pair.use_boosted_curve,
    )
    return pair
