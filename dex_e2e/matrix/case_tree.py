"""
Case Tree

A small describe/it registration tree. Scenarios register their cases here
at import time; a test module then parametrizes a single coroutine test over
`iter_cases()` so each leaf becomes an independent pytest item.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Iterator, List, Optional, Tuple

CaseRunner = Callable[[], Awaitable[Any]]


@dataclass(frozen=True)
class RegisteredCase:
    """Leaf of the tree: a label plus the coroutine factory to run"""
    path: Tuple[str, ...]
    label: str
    run: CaseRunner
    case: Any = None

    @property
    def test_id(self) -> str:
        return "/".join(self.path + (self.label,))


class CaseTree:
    """Named group of cases and nested groups, kept in registration order"""

    def __init__(self, name: str = ""):
        self.name = name
        self.children: List["CaseTree"] = []
        self.cases: List[RegisteredCase] = []
        self._path: Tuple[str, ...] = ()

    def _child(self, name: str) -> "CaseTree":
        for child in self.children:
            if child.name == name:
                return child
        child = CaseTree(name)
        child._path = self._path + (name,)
        self.children.append(child)
        return child

    @contextmanager
    def describe(self, name: str) -> Iterator["CaseTree"]:
        """Open (or re-open) a nested group"""
        yield self._child(str(name))

    def it(self, label: str, run: CaseRunner, case: Any = None) -> RegisteredCase:
        """Register a leaf case under this group. Labels may repeat."""
        registered = RegisteredCase(path=self._path, label=label, run=run, case=case)
        self.cases.append(registered)
        return registered

    def iter_cases(self) -> Iterator[RegisteredCase]:
        """Depth-first walk: own cases first, then each child group"""
        yield from self.cases
        for child in self.children:
            yield from child.iter_cases()

    def case_ids(self) -> List[str]:
        """
        Pytest ids for `iter_cases()`, in the same order.

        Repeated ids get a `#2`, `#3`, ... suffix so each leaf stays its own item.
        """
        seen: Dict[str, int] = {}
        ids = []
        for registered in self.iter_cases():
            count = seen.get(registered.test_id, 0) + 1
            seen[registered.test_id] = count
            ids.append(registered.test_id if count == 1 else f"{registered.test_id}#{count}")
        return ids

    def find(self, *names: str) -> Optional["CaseTree"]:
        node = self
        for name in names:
            node = next((child for child in node.children if child.name == name), None)
            if node is None:
                return None
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self.iter_cases())
