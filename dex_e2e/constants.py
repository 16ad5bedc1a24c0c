"""
Swap Test Constants

Networks, swap sides and contract methods used to describe E2E swap cases.
"""

from enum import Enum


class Network(int, Enum):
    """Supported networks, keyed by chain id"""

    MAINNET = 1
    OPTIMISM = 10
    POLYGON = 137
    ARBITRUM = 42161

    def __str__(self) -> str:
        return str(self.value)


class SwapSide(str, Enum):
    """Which leg of the swap carries the authoritative amount"""

    SELL = "SELL"  # amount is denominated in the source token
    BUY = "BUY"  # amount is denominated in the destination token

    def __str__(self) -> str:
        return self.value


class ContractMethod(str, Enum):
    """Augustus contract entry points an adapter can be routed through"""

    # Augustus V5
    SIMPLE_SWAP = "simpleSwap"
    MULTI_SWAP = "multiSwap"
    MEGA_SWAP = "megaSwap"
    SIMPLE_BUY = "simpleBuy"
    BUY = "buy"
    SWAP_ON_UNISWAP_V2_FORK = "swapOnUniswapV2Fork"
    BUY_ON_UNISWAP_V2_FORK = "buyOnUniswapV2Fork"
    DIRECT_UNI_V3_SWAP = "directUniV3Swap"
    DIRECT_UNI_V3_BUY = "directUniV3Buy"

    # Augustus V6
    SWAP_EXACT_AMOUNT_IN = "swapExactAmountIn"
    SWAP_EXACT_AMOUNT_OUT = "swapExactAmountOut"
    SWAP_EXACT_AMOUNT_IN_ON_UNISWAP_V2 = "swapExactAmountInOnUniswapV2"
    SWAP_EXACT_AMOUNT_OUT_ON_UNISWAP_V2 = "swapExactAmountOutOnUniswapV2"
    SWAP_EXACT_AMOUNT_IN_ON_UNISWAP_V3 = "swapExactAmountInOnUniswapV3"
    SWAP_EXACT_AMOUNT_OUT_ON_UNISWAP_V3 = "swapExactAmountOutOnUniswapV3"
    SWAP_EXACT_AMOUNT_IN_ON_CURVE_V1 = "swapExactAmountInOnCurveV1"
    SWAP_EXACT_AMOUNT_IN_ON_BALANCER_V2 = "swapExactAmountInOnBalancerV2"

    def __str__(self) -> str:
        return self.value


# Placeholder address the routing API uses for the network's native currency
NATIVE_TOKEN_ADDRESS = "0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE"

# Unlimited ERC-20 allowance
MAX_UINT256 = 2**256 - 1
