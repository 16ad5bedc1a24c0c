"""
DEX Swap E2E Test Matrix

Expands (network, dex, token pair) scenarios into the full matrix of swap
cases and runs each one against a forked chain.

Usage:
    from dex_e2e.matrix import CaseTree, register_network_scenario

    tree = CaseTree()
    register_network_scenario(
        tree, Network.POLYGON, "QuickSwapV3",
        "USDC", "DAI", "1000000000", "1000000000000000000000", "1000000000000000000",
    )
"""
