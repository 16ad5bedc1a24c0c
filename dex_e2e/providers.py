"""
Provider Factory

Builds the Web3 handle shared by every case of one scenario. The handle is
treated as read-only by the executor; only transactions are sent through it.
"""

import logging

from web3 import Web3
# web3.py 6.x uses geth_poa_middleware, 7.x uses ExtraDataToPOAMiddleware
try:
    from web3.middleware import ExtraDataToPOAMiddleware as poa_middleware
except ImportError:
    from web3.middleware import geth_poa_middleware as poa_middleware

from dex_e2e.constants import Network
from dex_e2e.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Chains whose block headers carry PoA extra data
POA_NETWORKS = {Network.POLYGON}


def create_provider(rpc_url: str, network: Network) -> Web3:
    """
    Create a Web3 provider for a network.

    No request is made here: like a static provider, the network is taken
    from the caller and never probed.

    Raises:
        ConfigurationError: If no RPC URL is configured for the network
    """
    if not rpc_url:
        raise ConfigurationError(
            f"No RPC endpoint configured for network {network} (set HTTP_PROVIDER_{int(network)})"
        )

    w3 = Web3(Web3.HTTPProvider(rpc_url))
    if network in POA_NETWORKS:
        w3.middleware_onion.inject(poa_middleware, layer=0)

    logger.info(f"Provider created: network={network}")
    return w3
