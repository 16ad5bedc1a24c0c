"""
Domain exceptions for the swap test matrix.

Registries and the provider factory raise ConfigurationError, the swap
executor raises ExecutionError subclasses. Nothing here is caught by the
matrix builder: the test runner reports them as failing cases.
"""

from typing import Optional


class SwapE2EError(Exception):
    """Base error for the swap test matrix."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(SwapE2EError, LookupError):
    """Unknown network, token, holder or missing RPC endpoint."""


class ExecutionError(SwapE2EError):
    """A swap case failed while pricing, building or submitting."""

    def __init__(self, message: str, tx_hash: Optional[str] = None):
        self.tx_hash = tx_hash
        super().__init__(message)


class RouteError(ExecutionError):
    """The routing API refused to price or build the swap."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class TransactionRevertedError(ExecutionError):
    """The swap transaction was mined with a failed status."""
