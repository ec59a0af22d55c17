"""
Typed seams for the 0x v2 protocol bindings.

The facade never talks to contracts itself: everything goes through an object
satisfying ContractWrappers, built per call by a ContractWrappersFactory, and
through SignatureUtils for order hash signatures.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable

from relayer_core.zeroex.models import SignerType

Order = Mapping[str, Any]


@runtime_checkable
class ExchangeWrapper(Protocol):
    async def validate_order_fillable_or_throw(self, order: Order) -> None: ...

    async def validate_fill_order_throw_if_invalid(
        self, order: Order, fill_taker_asset_amount: Decimal, taker_address: str
    ) -> None: ...

    def get_contract_address(self) -> str: ...

    def get_zrx_token_address(self) -> str: ...

    async def get_filled_taker_asset_amount(self, order_hash: str) -> Decimal: ...

    async def fill_or_kill_order(
        self, order: Order, taker_asset_fill_amount: Decimal, taker_address: str, **opts: Any
    ) -> str: ...

    async def batch_fill_or_kill_orders(
        self,
        orders: Sequence[Order],
        taker_asset_fill_amounts: Sequence[Decimal],
        taker_address: str,
        **opts: Any,
    ) -> str: ...

    async def cancel_order(self, order: Order, **opts: Any) -> str: ...

    async def market_buy_orders(
        self, orders: Sequence[Order], maker_asset_fill_amount: Decimal, taker_address: str, **opts: Any
    ) -> str: ...

    async def market_sell_orders(
        self, orders: Sequence[Order], taker_asset_fill_amount: Decimal, taker_address: str, **opts: Any
    ) -> str: ...


@runtime_checkable
class EtherTokenWrapper(Protocol):
    def get_contract_address_if_exists(self) -> str | None: ...

    async def deposit(self, ether_token_address: str, amount: Decimal, depositor: str) -> str: ...

    async def withdraw(self, ether_token_address: str, amount: Decimal, withdrawer: str) -> str: ...


@runtime_checkable
class ForwarderWrapper(Protocol):
    async def market_buy_orders_with_eth(
        self,
        orders: Sequence[Order],
        maker_asset_fill_amount: Decimal,
        taker_address: str,
        eth_amount: Decimal,
        fee_orders: Sequence[Order],
        fee_percentage: Any,
        fee_recipient_address: str,
        **opts: Any,
    ) -> str: ...

    async def market_sell_orders_with_eth(
        self,
        orders: Sequence[Order],
        taker_address: str,
        eth_amount: Decimal,
        fee_orders: Sequence[Order],
        fee_percentage: Any,
        fee_recipient_address: str,
        **opts: Any,
    ) -> str: ...


@runtime_checkable
class ContractWrappers(Protocol):
    exchange: ExchangeWrapper
    ether_token: EtherTokenWrapper
    forwarder: ForwarderWrapper


@runtime_checkable
class ContractWrappersFactory(Protocol):
    def __call__(self, provider: Any, network_id: int) -> ContractWrappers: ...


@runtime_checkable
class SignatureUtils(Protocol):
    async def ec_sign_order_hash(
        self, provider: Any, order_hash: str, signer_address: str, signer_type: SignerType
    ) -> str: ...
