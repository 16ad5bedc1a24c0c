from dex_e2e.execution.executor import execute_swap
from dex_e2e.execution.paraswap_client import ParaSwapClient

__all__ = ["ParaSwapClient", "execute_swap"]
