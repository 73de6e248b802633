"""Value objects: tokens, amounts and prices.

Snapshot parsing (amm_sdk.models.snapshot) builds Pairs, which depend on
these value objects, so it is exported from the top-level amm_sdk package.
"""

from amm_sdk.models.amounts import Price, TokenAmount
from amm_sdk.models.token import Token

__all__ = ["Price", "Token", "TokenAmount"]
