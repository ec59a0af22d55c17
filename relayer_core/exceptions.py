"""
Exception hierarchy for relayer-core.

Errors raised by the wrapped protocol library are not translated; they reach
the caller unchanged.
"""

from __future__ import annotations

from typing import Final

NO_FILLABLE_ORDERS_MESSAGE: Final[str] = (
    "There are no more valid orders to fill. "
    "Sometimes this happens when there are several invalid orders stored in the orderbook."
)


class RelayerCoreError(Exception):
    """Base exception for all relayer-core errors."""

    pass


class NoFillableOrdersError(RelayerCoreError):
    """Raised when filtering leaves no order that can be filled."""

    def __init__(self, message: str = NO_FILLABLE_ORDERS_MESSAGE) -> None:
        super().__init__(message)


class AccountUnavailableError(RelayerCoreError):
    """Raised when the Ethereum connection exposes no account to act with."""

    pass
