"""Shared validation helpers and pydantic annotated types.

Used by the value objects (Token, TokenAmount) and by the snapshot wire
model.
"""

from typing import Annotated, Any

from eth_utils import is_hex_address, to_checksum_address
from pydantic import BeforeValidator, Field

# Maximum uint256 value
UINT256_MAX = 2**256 - 1


def validate_uint256(value: Any) -> int:
    """Validate that a value is a non-negative integer that fits in uint256.

    Args:
        value: Integer or decimal integer string

    Returns:
        The value as an int

    Raises:
        ValueError: If value is not a non-negative integer within uint256 range
    """
    if isinstance(value, bool):
        raise ValueError(f"Uint256 must be string or int, got {type(value).__name__}")
    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError as err:
            raise ValueError(f"Uint256 must be a decimal integer string: '{value}'") from err
    if not isinstance(value, int):
        raise ValueError(f"Uint256 must be string or int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"Uint256 cannot be negative: {value}")
    if value > UINT256_MAX:
        raise ValueError(f"Uint256 overflow: {value} > 2^256-1")
    return value


def is_valid_address(address: str) -> bool:
    """Check if a string is a 0x-prefixed 20-byte hex address (any case)."""
    if not isinstance(address, str):
        return False
    if not address.startswith("0x"):
        return False
    return is_hex_address(address)


def checksum_address(address: str) -> str:
    """Validate an address and return its EIP-55 checksummed form.

    Raises:
        ValueError: If address is not a valid 20-byte hex address
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid address: {address} (must be 0x + 40 hex chars)")
    return to_checksum_address(address)


# Ethereum address (40 hex chars after 0x prefix)
Address = Annotated[str, Field(pattern=r"^0x[a-fA-F0-9]{40}$")]

# Raw token quantity; accepts decimal strings or ints
Uint256 = Annotated[
    int,
    BeforeValidator(validate_uint256),
    Field(description="256-bit unsigned integer (raw token units)"),
]
