"""
Swap Test Models

Immutable value records passed between the registries, the matrix builder
and the swap executor.
"""

from dataclasses import dataclass, field, replace
from typing import Any

from dex_e2e.constants import NATIVE_TOKEN_ADDRESS, ContractMethod, Network, SwapSide


@dataclass(frozen=True)
class Token:
    """Token as known to the routing API"""
    address: str
    decimals: int
    symbol: str

    @property
    def is_native(self) -> bool:
        return self.address.lower() == NATIVE_TOKEN_ADDRESS.lower()


@dataclass(frozen=True)
class TransferFeeParams:
    """
    Fee-on-transfer behaviour of the two swap legs, in basis points.

    src_fee / dest_fee apply to plain transfers of the source / destination
    token, src_dex_fee / dest_dex_fee to transfers routed through a DEX.
    """
    src_fee: int = 0
    dest_fee: int = 0
    src_dex_fee: int = 0
    dest_dex_fee: int = 0

    def with_dex_fees_swapped(self) -> "TransferFeeParams":
        """Exchange the DEX-context fees; plain transfer fees stay put."""
        return replace(self, src_dex_fee=self.dest_dex_fee, dest_dex_fee=self.src_dex_fee)


@dataclass(frozen=True)
class SwapScenario:
    """One (network, dex, token pair) combination to expand into cases"""
    network: Network
    dex_key: str
    token_a_symbol: str
    token_b_symbol: str
    token_a_amount: str  # raw units of token A
    token_b_amount: str  # raw units of token B
    native_token_amount: str  # raw units of the native currency
    transfer_fees: TransferFeeParams = field(default_factory=TransferFeeParams)


@dataclass(frozen=True)
class SwapCase:
    """A fully resolved swap, handed to the executor as-is"""
    src_token: Token
    dest_token: Token
    src_holder: str
    amount: str
    side: SwapSide
    dex_key: str
    contract_method: ContractMethod
    network: Network
    transfer_fees: TransferFeeParams = field(default_factory=TransferFeeParams)
    # Shared read-only Web3 handle
    provider: Any = field(default=None, compare=False, repr=False)

    @property
    def label(self) -> str:
        return f"{self.src_token.symbol} -> {self.dest_token.symbol}"

    @property
    def test_id(self) -> str:
        return f"{self.network}/{self.side}/{self.contract_method}/{self.label}"


@dataclass(frozen=True)
class SwapResult:
    """Outcome of a confirmed swap"""
    tx_hash: str
    gas_used: int
    dest_amount_received: int
