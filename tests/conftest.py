"""
Shared test fixtures for the swap matrix tests.

Provides reusable fixtures for:
- A stand-in provider handle (no RPC)
- A recording swap executor
- The reference scenarios (plain pair and tax-token pair)
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from dex_e2e.constants import Network
from dex_e2e.models import SwapScenario, TransferFeeParams


@pytest.fixture
def mock_provider():
    """Opaque provider handle; the matrix only passes it through."""
    return MagicMock(name="provider")


@pytest.fixture
def mock_executor():
    """Executor that records every case it is asked to run."""
    return AsyncMock(return_value=None)


@pytest.fixture
def quickswap_scenario():
    """QuickSwapV3 on Polygon, USDC/DAI, no transfer fees."""
    return SwapScenario(
        network=Network.POLYGON,
        dex_key="QuickSwapV3",
        token_a_symbol="USDC",
        token_b_symbol="DAI",
        token_a_amount="1000000000",
        token_b_amount="1000000000000000000000",
        native_token_amount="1000000000000000000",
    )


@pytest.fixture
def tax_token_scenario():
    """CamelotV3 on Arbitrum, RDPX (tax token) / WETH."""
    return SwapScenario(
        network=Network.ARBITRUM,
        dex_key="CamelotV3",
        token_a_symbol="RDPX",
        token_b_symbol="WETH",
        token_a_amount="100000000000000000000",
        token_b_amount="100000000000000000",
        native_token_amount="1000000000000000000",
        transfer_fees=TransferFeeParams(src_dex_fee=1000),
    )
