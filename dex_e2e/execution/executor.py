"""
Swap Executor

Runs one swap case end to end against a forked chain:

1. Price the swap through the requested DEX and contract method
2. Build the Augustus transaction for the holder
3. Impersonate the holder, approve the spender for ERC-20 sources
4. Send the transaction and wait for the receipt
5. Check the receipt status and that the holder received destination tokens

Web3 calls are blocking, so they run in worker threads.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

from web3 import Web3
from web3.exceptions import TimeExhausted, Web3Exception

from dex_e2e.config import settings
from dex_e2e.constants import MAX_UINT256, ContractMethod, Network, SwapSide
from dex_e2e.exceptions import ExecutionError, TransactionRevertedError
from dex_e2e.execution.paraswap_client import ParaSwapClient
from dex_e2e.models import SwapResult, Token, TransferFeeParams

logger = logging.getLogger(__name__)

# Minimal ERC-20 ABI (balance + approval)
ERC20_ABI = [
    {
        "constant": True,
        "inputs": [{"name": "_owner", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"name": "balance", "type": "uint256"}],
        "type": "function",
    },
    {
        "constant": False,
        "inputs": [
            {"name": "_spender", "type": "address"},
            {"name": "_value", "type": "uint256"}
        ],
        "name": "approve",
        "outputs": [{"name": "", "type": "bool"}],
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [
            {"name": "_owner", "type": "address"},
            {"name": "_spender", "type": "address"}
        ],
        "name": "allowance",
        "outputs": [{"name": "", "type": "uint256"}],
        "type": "function",
    },
]


async def execute_swap(
    src_token: Token,
    dest_token: Token,
    holder: str,
    amount: str,
    side: SwapSide,
    dex_key: str,
    contract_method: ContractMethod,
    network: Network,
    provider: Web3,
    price_route_override: Optional[Dict[str, Any]] = None,
    options_override: Optional[Dict[str, Any]] = None,
    transfer_fees: Optional[TransferFeeParams] = None,
    api_client: Optional[ParaSwapClient] = None,
) -> SwapResult:
    """
    Price, build and submit one swap from `holder` on the forked provider.

    Args:
        price_route_override: Use this route instead of asking the API
        options_override: Extra pricing query parameters
        transfer_fees: Fee-on-transfer hints for the pricer

    Raises:
        RouteError: If pricing or building fails
        ExecutionError: If the route uses another contract method, the
            receipt never arrives, or nothing is received
        TransactionRevertedError: If the swap reverts
    """
    if transfer_fees is None:
        transfer_fees = TransferFeeParams()
    client = api_client or ParaSwapClient()
    holder = Web3.to_checksum_address(holder)

    logger.info(
        f"E2E swap: dex={dex_key} network={network} side={side} method={contract_method} "
        f"{src_token.symbol} -> {dest_token.symbol} amount={amount}"
    )

    price_route = price_route_override
    if price_route is None:
        price_route = await client.get_price_route(
            src_token=src_token,
            dest_token=dest_token,
            amount=amount,
            side=side,
            network=network,
            dex_key=dex_key,
            contract_method=contract_method,
            transfer_fees=transfer_fees,
            user_address=holder,
            options=options_override,
        )

    routed_method = price_route.get("contractMethod")
    if routed_method != str(contract_method):
        raise ExecutionError(f"Route uses {routed_method}, expected {contract_method}")

    tx_params = await client.build_transaction(network, price_route, holder)

    return await submit_swap(provider, holder, src_token, dest_token, price_route, tx_params)


async def submit_swap(
    w3: Web3,
    holder: str,
    src_token: Token,
    dest_token: Token,
    price_route: Dict[str, Any],
    tx_params: Dict[str, Any],
) -> SwapResult:
    """Send a built swap transaction from an impersonated holder and verify the outcome"""
    if settings.fork_impersonation:
        await _impersonate(w3, holder)

    if not src_token.is_native:
        spender = price_route.get("tokenTransferProxy") or price_route["contractAddress"]
        await _ensure_allowance(w3, src_token, holder, spender)

    balance_before = await _balance_of(w3, dest_token, holder)

    tx = {
        "from": holder,
        "to": Web3.to_checksum_address(tx_params["to"]),
        "data": tx_params["data"],
        "value": int(tx_params.get("value", 0)),
    }
    if tx_params.get("gas"):
        tx["gas"] = int(tx_params["gas"])

    try:
        tx_hash = await asyncio.to_thread(lambda: w3.eth.send_transaction(tx))
        receipt = await asyncio.to_thread(
            lambda: w3.eth.wait_for_transaction_receipt(tx_hash, timeout=settings.receipt_timeout_seconds)
        )
    except TimeExhausted as e:
        raise ExecutionError(f"Swap receipt not received: {e}")
    except (ValueError, Web3Exception) as e:
        # JSON-RPC errors (reverted estimateGas, bad params)
        logger.error(f"Swap submission failed: {src_token.symbol} -> {dest_token.symbol}: {e}")
        raise ExecutionError(f"Swap submission failed: {e}")

    tx_hash_hex = Web3.to_hex(tx_hash)
    if receipt["status"] != 1:
        raise TransactionRevertedError(f"Swap transaction reverted: {tx_hash_hex}", tx_hash=tx_hash_hex)

    balance_after = await _balance_of(w3, dest_token, holder)
    received = balance_after - balance_before
    if dest_token.is_native:
        # gas was paid from the same balance
        received += receipt["gasUsed"] * receipt.get("effectiveGasPrice", 0)

    if received <= 0:
        raise ExecutionError(
            f"Swap received no {dest_token.symbol}: before={balance_before}, after={balance_after}",
            tx_hash=tx_hash_hex,
        )

    logger.info(
        f"Swap completed: tx_hash={tx_hash_hex}, gas_used={receipt['gasUsed']}, "
        f"received={received} {dest_token.symbol}"
    )
    return SwapResult(tx_hash=tx_hash_hex, gas_used=receipt["gasUsed"], dest_amount_received=received)


async def _impersonate(w3: Web3, address: str) -> None:
    await asyncio.to_thread(lambda: w3.provider.make_request("anvil_impersonateAccount", [address]))


async def _balance_of(w3: Web3, token: Token, owner: str) -> int:
    if token.is_native:
        return await asyncio.to_thread(lambda: w3.eth.get_balance(owner))

    contract = w3.eth.contract(address=Web3.to_checksum_address(token.address), abi=ERC20_ABI)
    return await asyncio.to_thread(lambda: contract.functions.balanceOf(owner).call())


async def _ensure_allowance(w3: Web3, token: Token, owner: str, spender: str) -> None:
    """Approve an unlimited allowance unless one is already in place"""
    spender = Web3.to_checksum_address(spender)
    contract = w3.eth.contract(address=Web3.to_checksum_address(token.address), abi=ERC20_ABI)

    current_allowance = await asyncio.to_thread(
        lambda: contract.functions.allowance(owner, spender).call()
    )
    if current_allowance == MAX_UINT256:
        return

    logger.info(f"Approving {token.symbol} for {spender} from {owner}")
    tx_hash = await asyncio.to_thread(
        lambda: contract.functions.approve(spender, MAX_UINT256).transact({"from": owner})
    )
    receipt = await asyncio.to_thread(
        lambda: w3.eth.wait_for_transaction_receipt(tx_hash, timeout=settings.receipt_timeout_seconds)
    )
    if receipt["status"] != 1:
        approve_hash = Web3.to_hex(tx_hash)
        raise TransactionRevertedError(f"Approval reverted: {approve_hash}", tx_hash=approve_hash)
