"""
Tests for dex_e2e/cli.py
"""

import argparse

import pytest

from dex_e2e.cli import main, parse_network, parse_side_methods
from dex_e2e.constants import ContractMethod, Network, SwapSide

QUICKSWAP_ARGS = [
    "list",
    "--network", "polygon",
    "--dex", "QuickSwapV3",
    "--token-a", "USDC",
    "--token-b", "DAI",
    "--amount-a", "1000000000",
    "--amount-b", "1000000000000000000000",
    "--native-amount", "1000000000000000000",
]


class TestParseNetwork:
    def test_by_name(self):
        assert parse_network("polygon") is Network.POLYGON
        assert parse_network("Arbitrum") is Network.ARBITRUM

    def test_by_chain_id(self):
        assert parse_network("10") is Network.OPTIMISM

    def test_unknown(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_network("56")
        with pytest.raises(argparse.ArgumentTypeError):
            parse_network("bsc")


class TestParseSideMethods:
    def test_default_is_sell_only(self):
        assert parse_side_methods(None) == {SwapSide.SELL: [ContractMethod.SWAP_EXACT_AMOUNT_IN]}

    def test_repeated_options_keep_order(self):
        parsed = parse_side_methods(["SELL=swapExactAmountIn,multiSwap", "buy=swapExactAmountOut"])
        assert list(parsed) == [SwapSide.SELL, SwapSide.BUY]
        assert parsed[SwapSide.SELL] == [ContractMethod.SWAP_EXACT_AMOUNT_IN, ContractMethod.MULTI_SWAP]
        assert parsed[SwapSide.BUY] == [ContractMethod.SWAP_EXACT_AMOUNT_OUT]

    @pytest.mark.parametrize("value", ["SELL", "SELL=", "SIDEWAYS=simpleSwap", "SELL=notAMethod"])
    def test_invalid(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_side_methods([value])


class TestListCommand:
    """Tests for `dex-e2e-matrix list`"""

    def test_default_methods(self, capsys):
        """Happy path: four SELL directions for the default method."""
        assert main(QUICKSWAP_ARGS) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "137/SELL/swapExactAmountIn/USDC -> DAI",
            "137/SELL/swapExactAmountIn/DAI -> USDC",
            "137/SELL/swapExactAmountIn/MATIC -> USDC",
            "137/SELL/swapExactAmountIn/USDC -> MATIC",
        ]

    def test_buy_side_with_src_dex_fee_is_skipped(self, capsys):
        """Edge case: BUY cases are not listed for a source DEX fee."""
        args = QUICKSWAP_ARGS + [
            "--side-methods", "SELL=swapExactAmountIn",
            "--side-methods", "BUY=swapExactAmountOut",
            "--src-dex-fee", "1000",
        ]
        assert main(args) == 0

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 4
        assert all("/SELL/" in line for line in lines)

    def test_verbose_shows_amounts_and_fees(self, capsys):
        assert main(QUICKSWAP_ARGS + ["--dest-dex-fee", "7", "-v"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert "amount=1000000000 " in lines[0]
        assert lines[0].endswith("fees=(0,0,0,7)")
        # B -> A carries the DEX fees swapped
        assert lines[1].endswith("fees=(0,0,7,0)")

    def test_unknown_token_fails(self, capsys):
        args = list(QUICKSWAP_ARGS)
        args[args.index("DAI")] = "FOO"
        assert main(args) == 1
        assert capsys.readouterr().out == ""

    def test_bad_side_methods(self, capsys):
        assert main(QUICKSWAP_ARGS + ["--side-methods", "SELL=bogus"]) == 2
        assert "error:" in capsys.readouterr().err

    def test_missing_required_option(self):
        with pytest.raises(SystemExit):
            main(["list", "--network", "polygon"])
