from dataclasses import dataclass

from pydantic import field_validator
from pydantic_settings import BaseSettings

from dex_e2e.constants import Network
from dex_e2e.tokens import native_symbol_of


class Settings(BaseSettings):
    # Private RPC endpoints, one per chain id (HTTP_PROVIDER_137=...)
    # Point these at a forked node: cases impersonate holders and send real txs
    http_provider_1: str = ""
    http_provider_10: str = ""
    http_provider_137: str = ""
    http_provider_42161: str = ""

    # Routing API used to price and build the swap transactions
    paraswap_api_url: str = "https://api.paraswap.io"
    paraswap_api_version: str = "6.2"
    paraswap_api_timeout: float = 30.0

    # Swap execution
    swap_slippage_bps: int = 100  # 1%
    receipt_timeout_seconds: int = 120
    fork_impersonation: bool = True  # anvil_impersonateAccount before sending

    # Opt-in switch for the live-chain test modules
    run_e2e: bool = False

    log_level: str = "INFO"

    @field_validator("paraswap_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


settings = Settings()


@dataclass(frozen=True)
class NetworkConfig:
    network: Network
    chain_id: int
    native_token_symbol: str
    private_http_provider: str


def generate_config(network: Network) -> NetworkConfig:
    """Resolve the per-network settings used to build a provider"""
    return NetworkConfig(
        network=network,
        chain_id=int(network),
        native_token_symbol=native_symbol_of(network),
        private_http_provider=getattr(settings, f"http_provider_{int(network)}", ""),
    )
