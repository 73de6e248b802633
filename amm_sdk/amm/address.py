"""Deterministic pair addresses.

Pairs are deployed by a factory with CREATE2, salted by the sorted token
pair, so the address is computable offline:

    salt = keccak256(abi.encodePacked(token0, token1))
    address = keccak256(0xff ++ factory ++ salt ++ init_code_hash)[12:]
"""

from __future__ import annotations

from functools import lru_cache

from eth_abi.packed import encode_packed
from eth_utils import keccak, to_checksum_address

from amm_sdk.config import DEFAULT_PAIR_CONFIG, PairConfig
from amm_sdk.models.token import Token


@lru_cache(maxsize=1024)
def _create2_address(factory: str, init_code_hash: str, token0: str, token1: str) -> str:
    token0_bytes = bytes.fromhex(token0[2:])
    token1_bytes = bytes.fromhex(token1[2:])
    salt = keccak(encode_packed(["address", "address"], [token0_bytes, token1_bytes]))
    data = b"\xff" + bytes.fromhex(factory[2:]) + salt + bytes.fromhex(init_code_hash[2:])
    return to_checksum_address("0x" + keccak(data)[12:].hex())


def compute_pair_address(token_a: Token, token_b: Token, config: PairConfig | None = None) -> str:
    """Address of the pair for two tokens, independent of argument order.

    Args:
        token_a: One token of the pair
        token_b: The other token
        config: Factory parameters (default: DEFAULT_PAIR_CONFIG)

    Returns:
        Checksummed pair address

    Raises:
        ChainMismatchError: If the tokens are on different chains
        IdenticalTokensError: If both tokens are the same
    """
    config = config or DEFAULT_PAIR_CONFIG
    token0, token1 = (token_a, token_b) if token_a.sorts_before(token_b) else (token_b, token_a)
    return _create2_address(config.factory_address, config.init_code_hash, token0.address, token1.address)
