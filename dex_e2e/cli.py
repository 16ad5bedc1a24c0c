"""
Swap Matrix CLI

Prints the case ids a scenario would register, without touching a chain.

Usage:
  dex-e2e-matrix list --network polygon --dex QuickSwapV3 \\
      --token-a USDC --token-b DAI \\
      --amount-a 1000000000 --amount-b 1000000000000000000000 \\
      --native-amount 1000000000000000000
"""

import argparse
import logging
import sys
from typing import Dict, List, Optional

from dex_e2e.config import settings
from dex_e2e.constants import ContractMethod, Network, SwapSide
from dex_e2e.exceptions import ConfigurationError
from dex_e2e.matrix.builder import DEFAULT_SIDE_TO_CONTRACT_METHODS, expand_scenario
from dex_e2e.models import SwapScenario, TransferFeeParams

logger = logging.getLogger(__name__)


def parse_network(value: str) -> Network:
    """Accept a network name (polygon) or chain id (137)"""
    if value.isdigit():
        try:
            return Network(int(value))
        except ValueError:
            raise argparse.ArgumentTypeError(f"Unknown chain id: {value}")
    try:
        return Network[value.upper()]
    except KeyError:
        raise argparse.ArgumentTypeError(f"Unknown network: {value}")


def parse_side_methods(values: Optional[List[str]]) -> Dict[SwapSide, List[ContractMethod]]:
    """
    Parse repeated SIDE=method[,method] options, keeping the given order.

    Example: ["SELL=swapExactAmountIn", "BUY=swapExactAmountOut"]
    """
    if not values:
        return dict(DEFAULT_SIDE_TO_CONTRACT_METHODS)

    side_to_methods: Dict[SwapSide, List[ContractMethod]] = {}
    for value in values:
        side_name, sep, methods = value.partition("=")
        if not sep or not methods:
            raise argparse.ArgumentTypeError(f"Expected SIDE=method[,method], got: {value}")
        try:
            side = SwapSide(side_name.upper())
            parsed = [ContractMethod(method.strip()) for method in methods.split(",")]
        except ValueError as e:
            raise argparse.ArgumentTypeError(str(e))
        side_to_methods.setdefault(side, []).extend(parsed)
    return side_to_methods


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="DEX swap E2E test matrix",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="Print the case ids a scenario registers")
    list_parser.add_argument("--network", required=True, type=parse_network,
                             help="Network name or chain id (e.g. polygon, 137)")
    list_parser.add_argument("--dex", required=True, help="DEX key (e.g. QuickSwapV3)")
    list_parser.add_argument("--token-a", required=True, help="Symbol of token A")
    list_parser.add_argument("--token-b", required=True, help="Symbol of token B")
    list_parser.add_argument("--amount-a", required=True, help="Raw amount of token A")
    list_parser.add_argument("--amount-b", required=True, help="Raw amount of token B")
    list_parser.add_argument("--native-amount", required=True, help="Raw amount of the native token")
    list_parser.add_argument("--side-methods", action="append", metavar="SIDE=METHOD[,METHOD]",
                             help="Contract methods to exercise per side (repeatable, default SELL=swapExactAmountIn)")
    list_parser.add_argument("--src-fee", type=int, default=0)
    list_parser.add_argument("--dest-fee", type=int, default=0)
    list_parser.add_argument("--src-dex-fee", type=int, default=0)
    list_parser.add_argument("--dest-dex-fee", type=int, default=0)
    list_parser.add_argument("--verbose", "-v", action="store_true",
                             help="Also print amount, holder and fees for each case")
    return parser


def list_cases(args: argparse.Namespace) -> int:
    try:
        side_to_methods = parse_side_methods(args.side_methods)
    except argparse.ArgumentTypeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    scenario = SwapScenario(
        network=args.network,
        dex_key=args.dex,
        token_a_symbol=args.token_a,
        token_b_symbol=args.token_b,
        token_a_amount=args.amount_a,
        token_b_amount=args.amount_b,
        native_token_amount=args.native_amount,
        transfer_fees=TransferFeeParams(
            src_fee=args.src_fee,
            dest_fee=args.dest_fee,
            src_dex_fee=args.src_dex_fee,
            dest_dex_fee=args.dest_dex_fee,
        ),
    )

    try:
        cases = expand_scenario(scenario, side_to_methods)
    except ConfigurationError as e:
        logger.error(f"Cannot expand scenario: {e}")
        return 1

    for case in cases:
        if args.verbose:
            fees = case.transfer_fees
            print(
                f"{case.test_id}  amount={case.amount} holder={case.src_holder} "
                f"fees=({fees.src_fee},{fees.dest_fee},{fees.src_dex_fee},{fees.dest_dex_fee})"
            )
        else:
            print(case.test_id)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s - %(levelname)s - %(message)s")
    args = build_parser().parse_args(argv)

    if args.command == "list":
        return list_cases(args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
