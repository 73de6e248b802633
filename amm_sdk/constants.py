"""Protocol constants.

Centralizes chain ids, fee units, factory parameters and well-known
wrapped-native tokens.
"""

from enum import IntEnum

from amm_sdk.models.token import Token


class ChainId(IntEnum):
    """Networks a pair can live on."""

    MAINNET = 1
    ROPSTEN = 3
    RINKEBY = 4
    GOERLI = 5
    KOVAN = 42
    BSC = 56
    BSCTESTNET = 97


# Fees are expressed in basis points out of this denominator (30 = 0.3%)
FEE_DENOMINATOR = 10_000

# Most forks charge 0.3%
DEFAULT_FEE_BPS = 30

# Boost of 1 is the plain constant-product curve
NO_BOOST = 1

# Placeholder CREATE2 parameters (the UniswapV2 factory and pair init code
# hash). Deployments on other factories override them through PairConfig.
FACTORY_ADDRESS = "0x5C69bEe701ef814a2B6a3EDD4B1652CB9cc5aA6f"
INIT_CODE_HASH = "0x96e8ac4277198ff8b6f785478aa9a39f403cb768dd02cbee326c3e7da348845f"

# Generic LP token metadata for Pair.liquidity_token, also placeholders
LIQUIDITY_TOKEN_DECIMALS = 18
LIQUIDITY_TOKEN_SYMBOL = "AMM-LP"
LIQUIDITY_TOKEN_NAME = "AMM Pair Liquidity"

# Wrapped native token per chain
WETH: dict[ChainId, Token] = {
    ChainId.MAINNET: Token(
        ChainId.MAINNET, "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2", 18, "WETH", "Wrapped Ether"
    ),
    ChainId.ROPSTEN: Token(
        ChainId.ROPSTEN, "0xc778417E063141139Fce010982780140Aa0cD5Ab", 18, "WETH", "Wrapped Ether"
    ),
    ChainId.RINKEBY: Token(
        ChainId.RINKEBY, "0xc778417E063141139Fce010982780140Aa0cD5Ab", 18, "WETH", "Wrapped Ether"
    ),
    ChainId.GOERLI: Token(
        ChainId.GOERLI, "0xB4FBF271143F4FBf7B91A5ded31805e42b2208d6", 18, "WETH", "Wrapped Ether"
    ),
    ChainId.KOVAN: Token(
        ChainId.KOVAN, "0xd0A1E359811322d97991E03f863a0C30C2cF029C", 18, "WETH", "Wrapped Ether"
    ),
    ChainId.BSC: Token(
        ChainId.BSC, "0xbb4CdB9CBd36B01bD1cBaEBF2De08d9173bc095c", 18, "WBNB", "Wrapped BNB"
    ),
    ChainId.BSCTESTNET: Token(
        ChainId.BSCTESTNET, "0xae13d989daC2f0dEbFf460aC112a837C89BAa7cd", 18, "WBNB", "Wrapped BNB"
    ),
}
