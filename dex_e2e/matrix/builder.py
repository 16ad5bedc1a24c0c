"""
Swap Test Matrix Builder

Expands one scenario (network, dex, token pair, amounts, transfer fees) into
the full set of swap cases and registers them on a CaseTree:

    <network>
      <side>
        <contract method>
          A -> B
          B -> A
          native -> A
          A -> native

Sides and methods come from a caller-declared mapping, since which contract
methods a DEX adapter is routed through cannot be discovered generically.
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Sequence

from dex_e2e.config import generate_config
from dex_e2e.constants import ContractMethod, Network, SwapSide
from dex_e2e.execution.executor import execute_swap
from dex_e2e.matrix.case_tree import CaseTree
from dex_e2e.models import SwapCase, SwapScenario, TransferFeeParams
from dex_e2e.providers import create_provider
from dex_e2e.tokens import native_symbol_of, resolve_holder, resolve_token

logger = logging.getLogger(__name__)

SideToContractMethods = Mapping[SwapSide, Sequence[ContractMethod]]
SwapExecutor = Callable[..., Awaitable[Any]]

DEFAULT_SIDE_TO_CONTRACT_METHODS: Dict[SwapSide, List[ContractMethod]] = {
    SwapSide.SELL: [ContractMethod.SWAP_EXACT_AMOUNT_IN],
}


@dataclass(frozen=True)
class Direction:
    """One row of the fixed case shape, before side/method are applied"""
    src_symbol: str
    dest_symbol: str
    sell_amount: str  # used when side is SELL (source-denominated)
    buy_amount: str  # used when side is BUY (destination-denominated)
    transfer_fees: TransferFeeParams


def swap_dex_fees(transfer_fees: TransferFeeParams) -> TransferFeeParams:
    """Re-orient fees for a reversed leg: only the DEX-context fees trade places"""
    return transfer_fees.with_dex_fees_swapped()


def select_amount(side: SwapSide, sell_amount: str, buy_amount: str) -> str:
    return sell_amount if side == SwapSide.SELL else buy_amount


def is_untestable_combination(side: SwapSide, transfer_fees: TransferFeeParams) -> bool:
    """
    BUY amounts are destination-denominated, which the executor cannot
    reconcile with a fee taken from the source token on the DEX leg. Such
    groups are left out of the matrix entirely.
    """
    return side == SwapSide.BUY and bool(transfer_fees.src_dex_fee)


def plan_directions(scenario: SwapScenario, native_symbol: str) -> List[Direction]:
    """The four directions every (side, method) group exercises, in order"""
    fees = scenario.transfer_fees
    # switch src and dest dex fee when the tax token ends up on the dest leg
    reversed_fees = swap_dex_fees(fees)
    a = scenario.token_a_symbol
    b = scenario.token_b_symbol

    return [
        Direction(a, b, scenario.token_a_amount, scenario.token_b_amount, fees),
        Direction(b, a, scenario.token_b_amount, scenario.token_a_amount, reversed_fees),
        Direction(native_symbol, a, scenario.native_token_amount, scenario.token_a_amount, reversed_fees),
        Direction(a, native_symbol, scenario.token_a_amount, scenario.native_token_amount, fees),
    ]


def expand_scenario(
    scenario: SwapScenario,
    side_to_contract_methods: Optional[SideToContractMethods] = None,
    provider: Any = None,
) -> List[SwapCase]:
    """
    Resolve every case of a scenario, in registration order.

    Raises:
        ConfigurationError: If a token, holder or the native symbol is unknown
            for the scenario's network
    """
    if side_to_contract_methods is None:
        side_to_contract_methods = DEFAULT_SIDE_TO_CONTRACT_METHODS

    network = scenario.network
    directions = plan_directions(scenario, native_symbol_of(network))

    # Resolve eagerly so a bad registry entry fails the scenario up front
    tokens = {}
    holders = {}
    for direction in directions:
        for symbol in (direction.src_symbol, direction.dest_symbol):
            if symbol not in tokens:
                tokens[symbol] = resolve_token(network, symbol)
        if direction.src_symbol not in holders:
            holders[direction.src_symbol] = resolve_holder(network, direction.src_symbol)

    cases = []
    for side, contract_methods in side_to_contract_methods.items():
        if is_untestable_combination(side, scenario.transfer_fees):
            continue
        for contract_method in contract_methods:
            for direction in directions:
                cases.append(SwapCase(
                    src_token=tokens[direction.src_symbol],
                    dest_token=tokens[direction.dest_symbol],
                    src_holder=holders[direction.src_symbol],
                    amount=select_amount(side, direction.sell_amount, direction.buy_amount),
                    side=side,
                    dex_key=scenario.dex_key,
                    contract_method=contract_method,
                    network=network,
                    transfer_fees=direction.transfer_fees,
                    provider=provider,
                ))
    return cases


def _case_runner(case: SwapCase, executor: SwapExecutor):
    async def run():
        return await executor(
            case.src_token,
            case.dest_token,
            case.src_holder,
            case.amount,
            case.side,
            case.dex_key,
            case.contract_method,
            case.network,
            case.provider,
            None,
            None,
            case.transfer_fees,
        )

    return run


def register_scenario(
    tree: CaseTree,
    scenario: SwapScenario,
    side_to_contract_methods: Optional[SideToContractMethods] = None,
    provider: Any = None,
    executor: Optional[SwapExecutor] = None,
) -> CaseTree:
    """
    Register a scenario's cases as network > side > method > "src -> dest".

    Returns the network node. Skipped (side, method) groups still get their
    method node, but it stays empty.
    """
    if side_to_contract_methods is None:
        side_to_contract_methods = DEFAULT_SIDE_TO_CONTRACT_METHODS
    if executor is None:
        executor = execute_swap

    cases = expand_scenario(scenario, side_to_contract_methods, provider)
    registered = 0

    with tree.describe(str(scenario.network)) as network_node:
        for side, contract_methods in side_to_contract_methods.items():
            with network_node.describe(str(side)) as side_node:
                for contract_method in contract_methods:
                    with side_node.describe(str(contract_method)) as method_node:
                        if is_untestable_combination(side, scenario.transfer_fees):
                            logger.debug(
                                f"Skipping {scenario.dex_key} {scenario.network}/{side}/{contract_method}: "
                                f"source token charges a DEX transfer fee"
                            )
                            continue
                        for case in cases:
                            if case.side == side and case.contract_method == contract_method:
                                method_node.it(case.label, _case_runner(case, executor), case=case)
                                registered += 1

    logger.info(
        f"Registered {registered} cases for {scenario.dex_key} on network {scenario.network}: "
        f"{scenario.token_a_symbol}/{scenario.token_b_symbol}"
    )
    return network_node


def register_network_scenario(
    tree: CaseTree,
    network: Network,
    dex_key: str,
    token_a_symbol: str,
    token_b_symbol: str,
    token_a_amount: str,
    token_b_amount: str,
    native_token_amount: str,
    transfer_fees: Optional[TransferFeeParams] = None,
    side_to_contract_methods: Optional[SideToContractMethods] = None,
    provider: Any = None,
    executor: Optional[SwapExecutor] = None,
) -> CaseTree:
    """
    Scenario entry point used by the per-DEX test modules.

    Builds the network's provider from configuration unless one is passed;
    a missing RPC endpoint aborts the whole scenario with ConfigurationError.
    """
    scenario = SwapScenario(
        network=network,
        dex_key=dex_key,
        token_a_symbol=token_a_symbol,
        token_b_symbol=token_b_symbol,
        token_a_amount=token_a_amount,
        token_b_amount=token_b_amount,
        native_token_amount=native_token_amount,
        transfer_fees=transfer_fees if transfer_fees is not None else TransferFeeParams(),
    )
    if provider is None:
        provider = create_provider(generate_config(network).private_http_provider, network)

    return register_scenario(
        tree,
        scenario,
        side_to_contract_methods=side_to_contract_methods,
        provider=provider,
        executor=executor,
    )
