"""
Token and Holder Registries

Per-network token definitions and funded holder addresses used by the E2E
swap cases. Holders are impersonated on the fork, so each one must carry
enough balance of its token for the amounts the scenarios use.
"""

from typing import Dict

from dex_e2e.constants import NATIVE_TOKEN_ADDRESS, Network
from dex_e2e.exceptions import ConfigurationError
from dex_e2e.models import Token

NATIVE_TOKEN_SYMBOLS: Dict[Network, str] = {
    Network.MAINNET: "ETH",
    Network.OPTIMISM: "ETH",
    Network.POLYGON: "MATIC",
    Network.ARBITRUM: "ETH",
}

TOKENS: Dict[Network, Dict[str, Token]] = {
    Network.MAINNET: {
        "ETH": Token(NATIVE_TOKEN_ADDRESS, 18, "ETH"),
        "WETH": Token("0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2", 18, "WETH"),
        "USDC": Token("0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48", 6, "USDC"),
        "USDT": Token("0xdAC17F958D2ee523a2206206994597C13D831ec7", 6, "USDT"),
        "DAI": Token("0x6B175474E89094C44Da98b954EedeAC495271d0F", 18, "DAI"),
        "WBTC": Token("0x2260FAC5E5542a773Aa44fBCfeDf7C193bc2C599", 8, "WBTC"),
    },
    Network.OPTIMISM: {
        "ETH": Token(NATIVE_TOKEN_ADDRESS, 18, "ETH"),
        "WETH": Token("0x4200000000000000000000000000000000000006", 18, "WETH"),
        "USDC": Token("0x0b2C639c533813f4Aa9D7837CAf62653d097Ff85", 6, "USDC"),
        "USDT": Token("0x94b008aA00579c1307B0EF2c499aD98a8ce58e58", 6, "USDT"),
        "DAI": Token("0xDA10009cBd5D07dd0CeCc66161FC93D7c9000da1", 18, "DAI"),
    },
    Network.POLYGON: {
        "MATIC": Token(NATIVE_TOKEN_ADDRESS, 18, "MATIC"),
        "WMATIC": Token("0x0d500B1d8E8eF31E21C99d1Db9A6444d3ADf1270", 18, "WMATIC"),
        "WETH": Token("0x7ceB23fD6bC0adD59E62ac25578270cFf1b9f619", 18, "WETH"),
        "USDC": Token("0x2791Bca1f2de4661ED88A30C99A7a9449Aa84174", 6, "USDC"),
        "USDT": Token("0xc2132D05D31c914a87C6611C10748AEb04B58e8F", 6, "USDT"),
        "DAI": Token("0x8f3Cf7ad23Cd3CaDbD9735AFf958023239c6A063", 18, "DAI"),
    },
    Network.ARBITRUM: {
        "ETH": Token(NATIVE_TOKEN_ADDRESS, 18, "ETH"),
        "WETH": Token("0x82aF49447D8a07e3bd95BD0d56f35241523fBab1", 18, "WETH"),
        "USDC": Token("0xaf88d065e77c8cC2239327C5EDb3A432268e5831", 6, "USDC"),
        "USDCe": Token("0xFF970A61A04b1cA14834A43f5dE4533eBDDB5CC8", 6, "USDCe"),
        "USDT": Token("0xFd086bC7CD5C481DCC9C85ebE478A1C0b69FCbb9", 6, "USDT"),
        "DAI": Token("0xDA10009cBd5D07dd0CeCc66161FC93D7c9000da1", 18, "DAI"),
        "RDPX": Token("0x32Eb7902D4134bf98A28b963D26de779AF92A212", 18, "RDPX"),  # tax token
    },
}

HOLDERS: Dict[Network, Dict[str, str]] = {
    Network.MAINNET: {
        "ETH": "0xF977814e90dA44bFA03b6295A0616a897441aceC",
        "WETH": "0x2f0b23f53734252bda2277357e97e1517d6b042a",
        "USDC": "0xF977814e90dA44bFA03b6295A0616a897441aceC",
        "USDT": "0xF977814e90dA44bFA03b6295A0616a897441aceC",
        "DAI": "0xF977814e90dA44bFA03b6295A0616a897441aceC",
        "WBTC": "0xF977814e90dA44bFA03b6295A0616a897441aceC",
    },
    Network.OPTIMISM: {
        "ETH": "0xF977814e90dA44bFA03b6295A0616a897441aceC",
        "WETH": "0x86Bb63148d17d445Ed5398ef26Aa05Bf76dD5b59",
        "USDC": "0xF977814e90dA44bFA03b6295A0616a897441aceC",
        "USDT": "0xF977814e90dA44bFA03b6295A0616a897441aceC",
        "DAI": "0x1eED63EfBA5f81D95bfe37d82C8E736b974F477b",
    },
    Network.POLYGON: {
        "MATIC": "0xF977814e90dA44bFA03b6295A0616a897441aceC",
        "WMATIC": "0x8dF3aad3a84da6b69A4DA8aeC3eA40d9091B2Ac4",
        "WETH": "0x62ac55b745F9B08F1a81DCbbE630277095Cf4Be1",
        "USDC": "0xF977814e90dA44bFA03b6295A0616a897441aceC",
        "USDT": "0xF977814e90dA44bFA03b6295A0616a897441aceC",
        "DAI": "0x4aac95EBE2eA6038982566741d1860556e265F8B",
    },
    Network.ARBITRUM: {
        "ETH": "0xF977814e90dA44bFA03b6295A0616a897441aceC",
        "WETH": "0x489ee077994B6658eAfA855C308275EAd8097C4A",
        "USDC": "0x2Df1c51E09aECF9cacB7bc98cB1742757f163dF7",
        "USDCe": "0x62383739D68Dd0F844103Db8dFb05a7EdED5BBE6",
        "USDT": "0xF977814e90dA44bFA03b6295A0616a897441aceC",
        "DAI": "0x2d070ed1321871841245D8EE5B84bD2712644322",
        "RDPX": "0x115b818593C00da4F9D1d8f5ea7d803cA5d8C8D4",
    },
}


def native_symbol_of(network: Network) -> str:
    """Symbol the registries use for the network's native currency"""
    try:
        return NATIVE_TOKEN_SYMBOLS[network]
    except KeyError:
        raise ConfigurationError(f"No native token symbol for network {network}")


def resolve_token(network: Network, symbol: str) -> Token:
    """
    Look up a token definition.

    Raises:
        ConfigurationError: If the network or symbol is unknown
    """
    tokens = TOKENS.get(network)
    if tokens is None:
        raise ConfigurationError(f"No tokens configured for network {network}")
    if symbol not in tokens:
        raise ConfigurationError(f"Unsupported token {symbol} on network {network}")
    return tokens[symbol]


def resolve_holder(network: Network, symbol: str) -> str:
    """
    Look up the funded holder address for a token.

    Raises:
        ConfigurationError: If the network or symbol is unknown
    """
    holders = HOLDERS.get(network)
    if holders is None:
        raise ConfigurationError(f"No holders configured for network {network}")
    if symbol not in holders:
        raise ConfigurationError(f"No holder for {symbol} on network {network}")
    return holders[symbol]
