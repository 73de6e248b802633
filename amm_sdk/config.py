"""Configuration for pair address derivation and pair defaults."""

import os
from dataclasses import dataclass

from amm_sdk.constants import (
    DEFAULT_FEE_BPS,
    FACTORY_ADDRESS,
    FEE_DENOMINATOR,
    INIT_CODE_HASH,
    LIQUIDITY_TOKEN_NAME,
    LIQUIDITY_TOKEN_SYMBOL,
)
from amm_sdk.models.types import checksum_address


@dataclass(frozen=True)
class PairConfig:
    """Deployment-specific parameters for pairs.

    Forks deploy the same pair bytecode behind different factories, so the
    CREATE2 inputs and LP token metadata are configuration rather than
    constants.

    Attributes:
        factory_address: Factory contract that deploys pairs
        init_code_hash: keccak256 of the pair creation bytecode (0x + 64 hex)
        default_fee_bps: Fee used when a snapshot does not carry a valid fee
        liquidity_token_symbol: Symbol of the pair's LP token
        liquidity_token_name: Name of the pair's LP token
    """

    factory_address: str = FACTORY_ADDRESS
    init_code_hash: str = INIT_CODE_HASH
    default_fee_bps: int = DEFAULT_FEE_BPS
    liquidity_token_symbol: str = LIQUIDITY_TOKEN_SYMBOL
    liquidity_token_name: str = LIQUIDITY_TOKEN_NAME

    def __post_init__(self) -> None:
        object.__setattr__(self, "factory_address", checksum_address(self.factory_address))
        code_hash = self.init_code_hash.lower()
        if not code_hash.startswith("0x") or len(code_hash) != 66:
            raise ValueError(f"Invalid init code hash: {self.init_code_hash} (must be 0x + 64 hex chars)")
        try:
            bytes.fromhex(code_hash[2:])
        except ValueError as err:
            raise ValueError(f"Invalid init code hash: {self.init_code_hash}") from err
        object.__setattr__(self, "init_code_hash", code_hash)
        if not 0 <= self.default_fee_bps < FEE_DENOMINATOR:
            raise ValueError(f"default_fee_bps must be in [0, {FEE_DENOMINATOR}): {self.default_fee_bps}")

    @classmethod
    def from_env(cls) -> "PairConfig":
        """Build a config with environment variable overrides.

        Configuration via environment variables:
        - AMM_SDK_FACTORY_ADDRESS: Factory address (default: UniswapV2 factory)
        - AMM_SDK_INIT_CODE_HASH: Pair init code hash (default: UniswapV2)
        - AMM_SDK_DEFAULT_FEE_BPS: Fallback fee in bps (default: 30)
        """
        return cls(
            factory_address=os.environ.get("AMM_SDK_FACTORY_ADDRESS", FACTORY_ADDRESS),
            init_code_hash=os.environ.get("AMM_SDK_INIT_CODE_HASH", INIT_CODE_HASH),
            default_fee_bps=int(os.environ.get("AMM_SDK_DEFAULT_FEE_BPS", str(DEFAULT_FEE_BPS))),
        )


# Default configuration instance
DEFAULT_PAIR_CONFIG = PairConfig()
