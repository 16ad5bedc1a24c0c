"""
Tests for dex_e2e/matrix/case_tree.py

Tests the describe/it registration tree used to collect swap cases.
"""

import pytest
from unittest.mock import AsyncMock

from dex_e2e.matrix.case_tree import CaseTree, RegisteredCase


class TestCaseTree:
    """Tests for CaseTree"""

    def test_empty_tree(self):
        tree = CaseTree()
        assert len(tree) == 0
        assert list(tree.iter_cases()) == []

    def test_nested_describe_builds_path(self):
        """Happy path: leaf ids join every group name with '/'."""
        tree = CaseTree()
        with tree.describe("137") as network:
            with network.describe("SELL") as side:
                with side.describe("swapExactAmountIn") as method:
                    method.it("USDC -> DAI", AsyncMock())

        [registered] = list(tree.iter_cases())
        assert registered.path == ("137", "SELL", "swapExactAmountIn")
        assert registered.test_id == "137/SELL/swapExactAmountIn/USDC -> DAI"

    def test_describe_reuses_existing_group(self):
        """Edge case: re-opening a group name appends to the same node."""
        tree = CaseTree()
        with tree.describe("137") as first:
            first.it("a", AsyncMock())
        with tree.describe("137") as second:
            second.it("b", AsyncMock())

        assert first is second
        assert len(tree.children) == 1
        assert [r.label for r in tree.iter_cases()] == ["a", "b"]

    def test_describe_stringifies_names(self):
        tree = CaseTree()
        with tree.describe(137) as node:
            assert node.name == "137"

    def test_iteration_order_is_registration_order(self):
        """Own cases come before child groups, children in insertion order."""
        tree = CaseTree()
        tree.it("root", AsyncMock())
        with tree.describe("SELL") as sell:
            sell.it("s1", AsyncMock())
            sell.it("s2", AsyncMock())
        with tree.describe("BUY") as buy:
            buy.it("b1", AsyncMock())

        assert [r.test_id for r in tree.iter_cases()] == ["root", "SELL/s1", "SELL/s2", "BUY/b1"]
        assert len(tree) == 4

    def test_repeated_label_is_kept(self):
        """Edge case: two leaves with the same label in one group both register."""
        tree = CaseTree()
        first_run, second_run = AsyncMock(), AsyncMock()
        with tree.describe("137") as node:
            node.it("USDC -> DAI", first_run)
            node.it("USDC -> DAI", second_run)

        assert [r.run for r in tree.iter_cases()] == [first_run, second_run]
        assert len(tree) == 2

    def test_case_ids_suffix_repeats(self):
        tree = CaseTree()
        with tree.describe("137") as node:
            node.it("USDC -> MATIC", AsyncMock())
            node.it("MATIC -> USDC", AsyncMock())
            node.it("MATIC -> USDC", AsyncMock())
            node.it("USDC -> MATIC", AsyncMock())
            node.it("USDC -> MATIC", AsyncMock())

        assert tree.case_ids() == [
            "137/USDC -> MATIC",
            "137/MATIC -> USDC",
            "137/MATIC -> USDC#2",
            "137/USDC -> MATIC#2",
            "137/USDC -> MATIC#3",
        ]

    def test_case_ids_without_repeats_match_test_ids(self):
        tree = CaseTree()
        with tree.describe("SELL") as sell:
            sell.it("a", AsyncMock())
            sell.it("b", AsyncMock())
        assert tree.case_ids() == [r.test_id for r in tree.iter_cases()]

    def test_same_label_in_different_groups_is_allowed(self):
        tree = CaseTree()
        with tree.describe("SELL") as sell:
            sell.it("USDC -> DAI", AsyncMock())
        with tree.describe("BUY") as buy:
            buy.it("USDC -> DAI", AsyncMock())
        assert len(tree) == 2

    def test_it_returns_registered_case(self):
        tree = CaseTree()
        run = AsyncMock()
        registered = tree.it("x", run, case="payload")
        assert isinstance(registered, RegisteredCase)
        assert registered.run is run
        assert registered.case == "payload"

    def test_find(self):
        tree = CaseTree()
        with tree.describe("137") as network:
            with network.describe("SELL") as side:
                pass

        assert tree.find("137", "SELL") is side
        assert tree.find("137", "BUY") is None
        assert tree.find() is tree

    @pytest.mark.asyncio
    async def test_registered_run_is_awaitable(self):
        run = AsyncMock(return_value="done")
        registered = CaseTree().it("x", run)
        assert await registered.run() == "done"
        run.assert_awaited_once()
