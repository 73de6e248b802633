"""Token value object."""

from __future__ import annotations

from dataclasses import dataclass, field

from amm_sdk.errors import ChainMismatchError, IdenticalTokensError
from amm_sdk.models.types import checksum_address


@dataclass(frozen=True, eq=False)
class Token:
    """An ERC20 token on a specific chain.

    Identity is (chain_id, address); decimals and display metadata do not
    take part in equality. The address is stored checksummed.

    Attributes:
        chain_id: Network the token lives on
        address: Token contract address
        decimals: Decimal places of the raw unit (0..77)
        symbol: Display symbol
        name: Display name
    """

    chain_id: int
    address: str
    decimals: int
    symbol: str | None = field(default=None)
    name: str | None = field(default=None)

    def __post_init__(self) -> None:
        if not 0 <= self.decimals <= 77:
            raise ValueError(f"Token decimals must be in [0, 77]: {self.decimals}")
        object.__setattr__(self, "address", checksum_address(self.address))

    def _key(self) -> tuple[int, str]:
        return int(self.chain_id), self.address.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: Token) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self._key() < other._key()

    def sorts_before(self, other: Token) -> bool:
        """True if this token is token0 of a pair with other.

        Pairs order their tokens by address bytes, which for hex strings is
        the same as comparing the lowercase forms.

        Raises:
            ChainMismatchError: If the tokens are on different chains
            IdenticalTokensError: If both tokens have the same address
        """
        if int(self.chain_id) != int(other.chain_id):
            raise ChainMismatchError(
                f"Tokens on different chains: {self.chain_id} != {other.chain_id}"
            )
        if self.address.lower() == other.address.lower():
            raise IdenticalTokensError(f"Identical token addresses: {self.address}")
        return self.address.lower() < other.address.lower()

    def __repr__(self) -> str:
        label = self.symbol or self.address
        return f"Token({label}, chain={int(self.chain_id)})"
